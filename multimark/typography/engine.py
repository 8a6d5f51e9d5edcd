from __future__ import annotations

from multimark.typography.config import TypographyConfig
from multimark.typography.dispatch import build_dispatch
from multimark.typography.quotes import decide, quote_entity


class SmartypantsRenderer:
    """Rewrites ASCII punctuation in inline runs into typographic entities.

    One renderer belongs to one document: the open/closed quote state carries
    over from one ``process()`` call to the next so quotes can be paired across
    inline runs. Not safe for concurrent use; build one per document.
    """

    def __init__(self, config: TypographyConfig | None = None) -> None:
        self.config = config or TypographyConfig()
        self.in_single_quote = False
        self.in_double_quote = False
        self.stats: dict[str, int] = {}
        self._dispatch = build_dispatch(self.config)

    def smart_quote(
        self,
        out: list[str],
        previous_char: str,
        next_char: str,
        quote: str,
        *,
        double: bool,
        add_nbsp: bool = False,
    ) -> None:
        if double:
            self.in_double_quote = decide(previous_char, next_char, self.in_double_quote)
            is_open = self.in_double_quote
        else:
            self.in_single_quote = decide(previous_char, next_char, self.in_single_quote)
            is_open = self.in_single_quote
        out.append(quote_entity(quote, is_open, add_nbsp))

    def process(self, out: list[str], text: str, previous_char: str = "") -> None:
        """Append the transformed ``text`` to ``out``.

        ``previous_char`` is the character right before ``text`` in the source,
        or ``""`` if there is none.
        """

        dispatch = self._dispatch
        mark = 0
        pos = 0
        n = len(text)
        while pos < n:
            m = dispatch.trigger_re.search(text, pos)
            if m is None:
                break
            i = m.start()
            handler = dispatch.handlers[text[i]]
            if i > mark:
                out.append(text[mark:i])
            prev = text[i - 1] if i > 0 else previous_char

            tmp: list[str] = []
            consumed = handler(self, tmp, prev, text[i:])
            emitted = "".join(tmp)
            out.append(emitted)
            if emitted != text[i : i + consumed + 1]:
                key = handler.__name__
                self.stats[key] = self.stats.get(key, 0) + 1

            mark = i + consumed + 1
            pos = mark
        if mark < n:
            out.append(text[mark:])

    def render(self, text: str, previous_char: str = "") -> str:
        out: list[str] = []
        self.process(out, text, previous_char)
        return "".join(out)
