from __future__ import annotations

import logging
from pathlib import Path

import pytest

from multimark.logging_setup import _resolve_level, ensure_file_logging


def test_file_logging_disabled_by_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MULTIMARK_DISABLE_FILE_LOG", "1")
    path = ensure_file_logging(log_dir=tmp_path / "logs")
    assert path == tmp_path / "logs" / "multimark.log"
    assert not (tmp_path / "logs").exists()


def test_file_logging_is_idempotent(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MULTIMARK_DISABLE_FILE_LOG", raising=False)
    monkeypatch.delenv("MULTIMARK_LOG_LEVEL", raising=False)
    root = logging.getLogger()
    before = list(root.handlers)
    try:
        first = ensure_file_logging(log_dir=tmp_path)
        second = ensure_file_logging(log_dir=tmp_path)
        assert first == second == (tmp_path / "multimark.log").resolve()
        added = [h for h in root.handlers if h not in before]
        assert len(added) == 1
    finally:
        for h in root.handlers[:]:
            if h not in before:
                root.removeHandler(h)
                h.close()


def test_file_logging_applies_env_level(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MULTIMARK_DISABLE_FILE_LOG", raising=False)
    monkeypatch.setenv("MULTIMARK_LOG_LEVEL", "debug")
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        ensure_file_logging(log_dir=tmp_path)
        assert root.level == logging.DEBUG
        added = [h for h in root.handlers if h not in before]
        assert [h.get_name() for h in added] == ["multimark-file"]
    finally:
        root.setLevel(level)
        for h in root.handlers[:]:
            if h not in before:
                root.removeHandler(h)
                h.close()


def test_unknown_env_level_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MULTIMARK_LOG_LEVEL", "chatty")
    assert _resolve_level("info") is None
    monkeypatch.delenv("MULTIMARK_LOG_LEVEL")
    assert _resolve_level("info") == logging.INFO
    assert _resolve_level(None) is None
