from __future__ import annotations

from dataclasses import dataclass, field

from multimark.inline.text import Segment, is_blank


@dataclass
class Text:
    segment: Segment
    # Marks code-span content, as opposed to literal text the tokenizer gave back.
    raw: bool = False

    def value(self, source: str) -> str:
        return self.segment.value(source)

    def is_blank(self, source: str) -> bool:
        return is_blank(self.value(source))


@dataclass
class CodeSpan:
    children: list[Text] = field(default_factory=list)
    # Source range from the first opening backtick to the last closing one.
    span: Segment = field(default_factory=lambda: Segment(0, 0))

    def append_child(self, child: Text) -> None:
        if child.segment.is_empty():
            return
        self.children.append(child)

    def is_blank(self, source: str) -> bool:
        return all(child.is_blank(source) for child in self.children)

    def value(self, source: str) -> str:
        return "".join(child.value(source) for child in self.children)
