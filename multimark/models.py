from __future__ import annotations

from pydantic import BaseModel, Field

MAX_TEXT_CHARS = 2_000_000


class ErrorEnvelope(BaseModel):
    code: str
    message: str
    request_id: str | None = None


class TypographyOptions(BaseModel):
    angled_quotes: bool = False
    quotes_nbsp: bool = False
    dashes: bool = True
    latex_dashes: bool = False
    fractions: bool = False


class RenderRequest(BaseModel):
    text: str
    options: TypographyOptions = Field(default_factory=TypographyOptions)


class RenderResponse(BaseModel):
    html: str
    stats: dict[str, int] = Field(default_factory=dict)


class SmartypantsRequest(BaseModel):
    text: str
    previous_char: str = Field(default="", max_length=1)
    options: TypographyOptions = Field(default_factory=TypographyOptions)


class SmartypantsResponse(BaseModel):
    output: str
