from __future__ import annotations

from pathlib import Path

import pytest

import multimark.cli as cli


def test_cli_writes_html_file(tmp_path: Path) -> None:
    src = tmp_path / "notes.md"
    dst = tmp_path / "notes.html"
    src.write_text("# Notes\n\nIt's 1/2 done...\n", encoding="utf-8")

    assert cli.main([str(src), str(dst)]) == 0
    assert dst.read_text(encoding="utf-8") == "<h1>Notes</h1>\n<p>It&rsquo;s &frac12; done&hellip;</p>\n"


def test_cli_prints_to_stdout_and_honours_flags(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = tmp_path / "in.md"
    src.write_bytes(b"\xef\xbb\xbf" + b"\"a\" -- b")

    assert cli.main([str(src), "--angled-quotes", "--no-dashes"]) == 0
    assert capsys.readouterr().out == "<p>&laquo;a&raquo; -- b</p>\n"


def test_cli_missing_input_returns_error(tmp_path: Path) -> None:
    assert cli.main([str(tmp_path / "missing.md")]) == 1


def test_cli_unwritable_output_returns_error(tmp_path: Path) -> None:
    src = tmp_path / "in.md"
    src.write_text("x", encoding="utf-8")
    assert cli.main([str(src), str(tmp_path / "no-such-dir" / "out.html")]) == 1


def test_cli_usage_error_exits_2() -> None:
    with pytest.raises(SystemExit) as e:
        cli.main([])
    assert e.value.code == 2


def test_decode_text_prefers_utf8_sig() -> None:
    assert cli._decode_text(b"\xef\xbb\xbfabc") == "abc"


def test_decode_text_falls_back_to_gb18030() -> None:
    assert cli._decode_text("中文".encode("gb18030")) == "中文"
