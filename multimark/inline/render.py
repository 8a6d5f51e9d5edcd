from __future__ import annotations

from multimark.inline.ast import CodeSpan
from multimark.inline.code_span import parse_code_span
from multimark.inline.text import BlockReader
from multimark.typography.engine import SmartypantsRenderer

_ESCAPES = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;"})


def escape_html(s: str) -> str:
    # Single quotes stay literal so the typography pass can still see them.
    return s.translate(_ESCAPES)


def render_inline(source: str, renderer: SmartypantsRenderer, stats: dict[str, int] | None = None) -> str:
    """Render one paragraph of inline markdown to HTML.

    Code spans become ``<code>`` elements; everything else is escaped and run
    through ``renderer``. The text following a code span is processed with no
    preceding character, the span's markup being invisible to the quote rules.
    """

    reader = BlockReader.from_text(source)
    out: list[str] = []
    pending: list[str] = []
    previous_char = ""

    def flush_text() -> None:
        nonlocal pending
        if pending:
            renderer.process(out, escape_html("".join(pending)), previous_char)
        pending = []

    while True:
        line, _ = reader.peek_line()
        if line is None:
            break
        i = line.find("`")
        if i < 0:
            pending.append(line)
            reader.advance_line()
            continue

        pending.append(line[:i])
        reader.advance(i)
        node = parse_code_span(reader)
        if isinstance(node, CodeSpan):
            flush_text()
            content = node.value(source).replace("\r\n", " ").replace("\n", " ")
            out.append(f"<code>{escape_html(content)}</code>")
            previous_char = ""
            if stats is not None:
                stats["code_spans"] = stats.get("code_spans", 0) + 1
        else:
            pending.append(node.value(source))

    flush_text()
    return "".join(out)
