from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Segment:
    """Half-open range ``[start, stop)`` into an immutable source string."""

    start: int
    stop: int

    def __post_init__(self) -> None:
        if self.start > self.stop:
            raise ValueError(f"invalid segment [{self.start}, {self.stop})")

    def __len__(self) -> int:
        return self.stop - self.start

    def is_empty(self) -> bool:
        return self.start == self.stop

    def with_start(self, start: int) -> Segment:
        return replace(self, start=start)

    def with_stop(self, stop: int) -> Segment:
        return replace(self, stop=stop)

    def value(self, source: str) -> str:
        return source[self.start : self.stop]


@dataclass(frozen=True)
class Cursor:
    line: int
    offset: int


def is_blank(s: str) -> bool:
    return s.strip() == ""


def _line_segments(source: str) -> list[Segment]:
    segments: list[Segment] = []
    start = 0
    for line in source.splitlines(keepends=True):
        segments.append(Segment(start, start + len(line)))
        start += len(line)
    return segments


class BlockReader:
    """Line-oriented reader over the lines of one block.

    Lines keep their line endings. ``peek_line()`` returns the unread part of
    the current line, or ``None`` once every line has been consumed.
    """

    def __init__(self, source: str, lines: list[Segment]) -> None:
        self._source = source
        self._lines = lines
        self._line = 0
        self._offset = lines[0].start if lines else 0

    @classmethod
    def from_text(cls, source: str) -> BlockReader:
        return cls(source, _line_segments(source))

    @property
    def source(self) -> str:
        return self._source

    def peek_line(self) -> tuple[str | None, Segment]:
        if self._line >= len(self._lines):
            return None, Segment(self._offset, self._offset)
        seg = self._lines[self._line].with_start(self._offset)
        return seg.value(self._source), seg

    def advance(self, n: int) -> None:
        """Move ``n`` characters forward, never past the end of the current line."""

        if self._line >= len(self._lines):
            return
        self._offset = min(self._offset + n, self._lines[self._line].stop)

    def advance_line(self) -> None:
        if self._line >= len(self._lines):
            return
        self._line += 1
        if self._line < len(self._lines):
            self._offset = self._lines[self._line].start
        else:
            self._offset = self._lines[-1].stop

    def position(self) -> Cursor:
        return Cursor(self._line, self._offset)

    def set_position(self, cursor: Cursor) -> None:
        self._line = cursor.line
        self._offset = cursor.offset
