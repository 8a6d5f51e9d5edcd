from __future__ import annotations

import string
from enum import StrEnum

_SPACE = " \t\n\r\f\v"
_PUNCT = string.punctuation


class CharClass(StrEnum):
    ABSENT = "absent"
    SPACE = "space"
    PUNCT = "punct"
    OTHER = "other"


def is_space(c: str) -> bool:
    return c != "" and c in _SPACE


def is_punct(c: str) -> bool:
    return c != "" and c in _PUNCT


def word_boundary(c: str) -> bool:
    return c == "" or is_space(c) or is_punct(c)


def classify(c: str) -> CharClass:
    """Reduce a neighbouring character to one of four classes.

    The empty string stands for "no character": the start of the text, or an
    edge of the buffer where a tag we never get to see is likely sitting.
    Non-ASCII characters are always OTHER.
    """

    if c == "":
        return CharClass.ABSENT
    if is_space(c):
        return CharClass.SPACE
    if is_punct(c):
        return CharClass.PUNCT
    return CharClass.OTHER


_A, _S, _P, _O = CharClass.ABSENT, CharClass.SPACE, CharClass.PUNCT, CharClass.OTHER

# (before, after) -> True open, False close, None toggle.
_POLICY: dict[tuple[CharClass, CharClass], bool | None] = {
    (_A, _A): None,  # no context at all
    (_S, _A): True,  # [ "] might be [ "<code>foo...]
    (_P, _A): False,  # [!"] could be [Run!"] or [("<code>...]
    (_O, _A): False,  # [a"]
    (_A, _S): False,  # [" ] might be [...foo</code>" ]
    (_S, _S): None,  # [ " ]
    (_P, _S): False,  # [!" ]
    (_O, _S): False,  # [a" ]
    (_A, _P): False,  # ["!] could be ["$1.95] or [</code>"!...]
    (_S, _P): True,  # [ "!] looks more like [ "$1.95]
    (_P, _P): None,  # [!"!]
    (_O, _P): False,  # [a"!]
    (_A, _O): True,  # ["a]
    (_S, _O): True,  # [ "a]
    (_P, _O): True,  # [!"a]
    (_O, _O): False,  # [a'b] maybe a contraction
}


def decide(previous_char: str, next_char: str, is_open: bool) -> bool:
    """Return the new open/closed state for a quote mark between two characters."""

    verdict = _POLICY[(classify(previous_char), classify(next_char))]
    if verdict is None:
        return not is_open
    return verdict


def quote_entity(quote: str, is_open: bool, add_nbsp: bool = False) -> str:
    """Build the entity for a quote family letter: ``s``, ``d`` or ``a``."""

    entity = f"&{'l' if is_open else 'r'}{quote}quo;"
    if not add_nbsp:
        return entity
    if is_open:
        return "&nbsp;" + entity
    return entity + "&nbsp;"
