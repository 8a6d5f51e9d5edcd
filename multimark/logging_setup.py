from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from multimark.env import env_truthy

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_FILE_LOG_MAX_BYTES = 5 * 1024 * 1024
_FILE_LOG_BACKUPS = 3


def _formatter() -> logging.Formatter:
    return logging.Formatter(fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT)


def _resolve_level(default: str | None) -> int | None:
    """MULTIMARK_LOG_LEVEL wins over ``default``; unknown names are ignored."""

    name = str(os.getenv("MULTIMARK_LOG_LEVEL", "") or "").strip() or default
    if not name:
        return None
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else None


def _existing_file_log(root: logging.Logger, log_file: Path) -> Path | None:
    for handler in root.handlers:
        base = getattr(handler, "baseFilename", None)
        if not base:
            continue
        path = Path(str(base)).resolve()
        if handler.get_name() == "multimark-file" or path == log_file:
            return path
    return None


def configure_console_logging(level: str = "warning") -> None:
    """Log to stderr for command-line use."""

    resolved = _resolve_level(level)
    handler = logging.StreamHandler()
    handler.setFormatter(_formatter())
    logging.basicConfig(level=resolved if resolved is not None else logging.WARNING, handlers=[handler])


def ensure_file_logging(*, log_dir: Path, filename: str = "multimark.log") -> Path:
    """Add one rotating ``multimark.log`` handler to the root logger.

    Repeated calls return the path of the handler already installed. With
    MULTIMARK_DISABLE_FILE_LOG set nothing is created on disk.
    """

    if env_truthy("MULTIMARK_DISABLE_FILE_LOG"):
        return log_dir / filename

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = (log_dir / filename).resolve()

    root = logging.getLogger()
    existing = _existing_file_log(root, log_file)
    if existing is not None:
        return existing

    handler = RotatingFileHandler(
        log_file,
        maxBytes=_FILE_LOG_MAX_BYTES,
        backupCount=_FILE_LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.set_name("multimark-file")
    handler.setLevel(logging.INFO)
    handler.setFormatter(_formatter())
    root.addHandler(handler)

    resolved = _resolve_level(None)
    if resolved is not None:
        root.setLevel(resolved)
    return log_file
