from __future__ import annotations

from multimark.inline.ast import CodeSpan, Text
from multimark.inline.text import BlockReader, Segment, is_blank


def _run_length(line: str, start: int) -> int:
    end = start
    while end < len(line) and line[end] == "`":
        end += 1
    return end - start


def _find_closer(line: str, opener: int) -> int:
    """Return the index just past a closing run of exactly ``opener`` backticks, or -1."""

    i = line.find("`")
    while i >= 0:
        run = _run_length(line, i)
        if run == opener:
            return i + run
        i = line.find("`", i + run)
    return -1


def parse_code_span(reader: BlockReader) -> CodeSpan | Text:
    """Parse a code span starting at the reader's current backtick.

    On success the reader sits just past the closing run. When no closing run
    of the same length exists, the reader is rewound to just past the opening
    run and the opener itself comes back as literal text.
    """

    line, start_segment = reader.peek_line()
    if line is None:
        return Text(start_segment)
    opener = _run_length(line, 0)
    reader.advance(opener)
    saved = reader.position()

    node = CodeSpan()
    while True:
        line, segment = reader.peek_line()
        if line is None:
            reader.set_position(saved)
            return Text(start_segment.with_stop(start_segment.start + opener))

        end = _find_closer(line, opener)
        if end >= 0:
            node.append_child(Text(segment.with_stop(segment.start + end - opener), raw=True))
            reader.advance(end)
            node.span = Segment(start_segment.start, segment.start + end)
            break

        if not is_blank(line):
            node.append_child(Text(segment, raw=True))
        reader.advance_line()

    source = reader.source
    if node.children and not node.is_blank(source):
        first = node.children[0]
        last = node.children[-1]
        if source[first.segment.start] == " " and source[last.segment.stop - 1] == " ":
            # Strip one space on each side, nothing more.
            first.segment = first.segment.with_start(first.segment.start + 1)
            last.segment = last.segment.with_stop(last.segment.stop - 1)
    return node
