"""Punctuation handlers for the smartypants driver.

Every handler has the signature ``(renderer, out, previous_char, text) -> int``:
``text`` starts at the trigger character, ``previous_char`` is the raw
character before it (``""`` when unknown) and the return value is how many
characters *after* the trigger were consumed. A handler that does not
recognise its input appends the trigger character unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from multimark.typography.quotes import word_boundary

if TYPE_CHECKING:
    from multimark.typography.engine import SmartypantsRenderer

FRACTION_SLASH = "\u2044"


def _char_at(text: str, i: int) -> str:
    return text[i] if i < len(text) else ""


def single_quote(r: SmartypantsRenderer, out: list[str], previous_char: str, text: str) -> int:
    if len(text) >= 2:
        t1 = text[1].lower()

        if t1 == "'":
            r.smart_quote(out, previous_char, _char_at(text, 2), "d", double=True)
            return 1

        if t1 in "stmd" and word_boundary(_char_at(text, 2)):
            out.append("&rsquo;")
            return 0

        if len(text) >= 3 and text[1:3].lower() in ("re", "ll", "ve") and word_boundary(_char_at(text, 3)):
            out.append("&rsquo;")
            return 0

    r.smart_quote(out, previous_char, _char_at(text, 1), "s", double=False)
    return 0


# A literal " is padded under quotes_nbsp just like &quot;.
def double_quote(r: SmartypantsRenderer, out: list[str], previous_char: str, text: str) -> int:
    r.smart_quote(out, previous_char, _char_at(text, 1), "d", double=True, add_nbsp=r.config.quotes_nbsp)
    return 0


def angled_double_quote(r: SmartypantsRenderer, out: list[str], previous_char: str, text: str) -> int:
    r.smart_quote(out, previous_char, _char_at(text, 1), "a", double=True, add_nbsp=r.config.quotes_nbsp)
    return 0


def parens(r: SmartypantsRenderer, out: list[str], previous_char: str, text: str) -> int:
    if len(text) >= 3:
        t1 = text[1].lower()
        t2 = text[2].lower()

        if t1 == "c" and t2 == ")":
            out.append("&copy;")
            return 2

        if t1 == "r" and t2 == ")":
            out.append("&reg;")
            return 2

        if len(text) >= 4 and t1 == "t" and t2 == "m" and text[3] == ")":
            out.append("&trade;")
            return 3

    out.append(text[0])
    return 0


def dash(r: SmartypantsRenderer, out: list[str], previous_char: str, text: str) -> int:
    if len(text) >= 2:
        if text[1] == "-":
            out.append("&mdash;")
            return 1

        if word_boundary(previous_char) and word_boundary(text[1]):
            out.append("&ndash;")
            return 0

    out.append(text[0])
    return 0


def dash_latex(r: SmartypantsRenderer, out: list[str], previous_char: str, text: str) -> int:
    if text.startswith("---"):
        out.append("&mdash;")
        return 2
    if text.startswith("--"):
        out.append("&ndash;")
        return 1

    out.append(text[0])
    return 0


def ampersand(r: SmartypantsRenderer, out: list[str], previous_char: str, text: str) -> int:
    # Input that was HTML-escaped upstream still gets smart quotes, and the
    # entities we emit ourselves are never touched twice.
    if text.startswith("&quot;"):
        quote = "a" if r.config.angled_quotes else "d"
        r.smart_quote(out, previous_char, _char_at(text, 6), quote, double=True, add_nbsp=r.config.quotes_nbsp)
        return 5

    # Only one pass: dropping "&#0;" out of "&#&#0;0;" leaves a new "&#0;" behind.
    if text.startswith("&#0;"):
        return 3

    out.append("&")
    return 0


def period(r: SmartypantsRenderer, out: list[str], previous_char: str, text: str) -> int:
    if text.startswith("..."):
        out.append("&hellip;")
        return 2

    if text.startswith(". . ."):
        out.append("&hellip;")
        return 4

    out.append(text[0])
    return 0


def backtick(r: SmartypantsRenderer, out: list[str], previous_char: str, text: str) -> int:
    if text.startswith("``"):
        r.smart_quote(out, previous_char, _char_at(text, 2), "d", double=True)
        return 1

    out.append(text[0])
    return 0


def left_angle(r: SmartypantsRenderer, out: list[str], previous_char: str, text: str) -> int:
    # Inline markup is opaque: attribute values keep their straight quotes.
    end = text.find(">")
    if end < 0:
        end = len(text) - 1
    out.append(text[: end + 1])
    return end


def _fraction_boundary(text: str, i: int) -> bool:
    # End of text always closes the fraction.
    return i >= len(text) or (word_boundary(text[i]) and text[i] != "/")


def number_generic(r: SmartypantsRenderer, out: list[str], previous_char: str, text: str) -> int:
    """Turn ``\\d+/\\d+\\b`` into superscript/subscript markup.

    Either the ASCII slash or the fraction slash (U+2044) separates the two
    numbers. Dates such as 1/23/2005 are left alone.
    """

    if word_boundary(previous_char) and previous_char != "/" and len(text) >= 3:
        num_end = 0
        while num_end < len(text) and text[num_end].isdigit() and text[num_end].isascii():
            num_end += 1

        if num_end + 2 <= len(text) and text[num_end] in ("/", FRACTION_SLASH):
            den_start = num_end + 1
            den_end = den_start
            while den_end < len(text) and text[den_end].isdigit() and text[den_end].isascii():
                den_end += 1

            if den_end > den_start and _fraction_boundary(text, den_end):
                out.append(f"<sup>{text[:num_end]}</sup>&frasl;<sub>{text[den_start:den_end]}</sub>")
                return den_end - 1

    out.append(text[0])
    return 0


def number(r: SmartypantsRenderer, out: list[str], previous_char: str, text: str) -> int:
    if word_boundary(previous_char) and previous_char != "/" and len(text) >= 3:
        head = text[:3]
        tail = text[3:6].lower()

        if head == "1/2" and _fraction_boundary(text, 3):
            out.append("&frac12;")
            return 2

        if head == "1/4" and (_fraction_boundary(text, 3) or tail.startswith("th")):
            out.append("&frac14;")
            return 2

        if head == "3/4" and (_fraction_boundary(text, 3) or tail == "ths"):
            out.append("&frac34;")
            return 2

    out.append(text[0])
    return 0
