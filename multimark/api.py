from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Body, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from multimark.converters import _INTERNAL_ERROR_MESSAGE, _config_from_options, _error, _request_id_from_request
from multimark.document import convert_markdown
from multimark.logging_setup import ensure_file_logging
from multimark.models import (
    MAX_TEXT_CHARS,
    RenderRequest,
    RenderResponse,
    SmartypantsRequest,
    SmartypantsResponse,
)
from multimark.typography.engine import SmartypantsRenderer

logger = logging.getLogger(__name__)

WORKDIR = Path(__file__).resolve().parent.parent
LOG_DIR = Path(os.getenv("MULTIMARK_LOG_DIR", "") or (WORKDIR / "output" / "logs"))


def _check_text_size(text: str) -> None:
    if len(text) > MAX_TEXT_CHARS:
        raise HTTPException(status_code=413, detail=f"text exceeds {MAX_TEXT_CHARS} characters")


@asynccontextmanager
async def _lifespan(_app: FastAPI) -> AsyncIterator[None]:
    log_file = ensure_file_logging(log_dir=LOG_DIR)
    logger.info("file logging enabled: %s", log_file)
    yield


app = FastAPI(lifespan=_lifespan)


@app.middleware("http")
async def _request_id_middleware(request: Request, call_next):
    request_id = _request_id_from_request(request)
    response = await call_next(request)
    response.headers["x-request-id"] = request_id
    return response


# Starlette raises its base class for unknown routes and wrong methods.
@app.exception_handler(StarletteHTTPException)
async def _http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error(int(exc.status_code), str(exc.detail), request_id=_request_id_from_request(request))


@app.exception_handler(RequestValidationError)
async def _validation_exception_handler(request: Request, exc: RequestValidationError):
    msg = "bad request"
    errors = exc.errors()
    if errors:
        msg = errors[0].get("msg") or msg
    return _error(400, msg, request_id=_request_id_from_request(request))


@app.exception_handler(Exception)
async def _unhandled_exception_handler(request: Request, exc: Exception):
    request_id = _request_id_from_request(request)
    logger.exception("unhandled error (request_id=%s)", request_id)
    return _error(500, _INTERNAL_ERROR_MESSAGE, request_id=request_id)


@app.get("/healthz")
async def healthz():
    return {"ok": True}


@app.post("/api/v1/render", response_model=RenderResponse)
def render_document(body: RenderRequest = Body(...)):
    _check_text_size(body.text)
    result = convert_markdown(body.text, _config_from_options(body.options))
    logger.info("rendered document: %s chars in, %s chars out", len(body.text), len(result.html))
    return RenderResponse(html=result.html, stats=result.stats)


@app.post("/api/v1/smartypants", response_model=SmartypantsResponse)
def smartypants(body: SmartypantsRequest = Body(...)):
    _check_text_size(body.text)
    renderer = SmartypantsRenderer(_config_from_options(body.options))
    return SmartypantsResponse(output=renderer.render(body.text, body.previous_char))
