from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING

from multimark.typography import handlers as h
from multimark.typography.config import TypographyConfig

if TYPE_CHECKING:
    from multimark.typography.engine import SmartypantsRenderer

Handler = Callable[["SmartypantsRenderer", list[str], str, str], int]


@dataclass(frozen=True)
class DispatchTable:
    handlers: Mapping[str, Handler]
    # Matches any character with a handler.
    trigger_re: re.Pattern[str]


@lru_cache(maxsize=None)
def build_dispatch(config: TypographyConfig) -> DispatchTable:
    """Build the trigger table for a configuration.

    Tables are cached per configuration and read-only, so renderers built from
    equal configurations share one table.
    """

    table: dict[str, Handler] = {}

    table['"'] = h.angled_double_quote if config.angled_quotes else h.double_quote
    table["&"] = h.ampersand
    table["'"] = h.single_quote
    table["("] = h.parens
    if config.dashes:
        table["-"] = h.dash_latex if config.latex_dashes else h.dash
    table["."] = h.period
    if config.fractions:
        for ch in "123456789":
            table[ch] = h.number_generic
    else:
        table["1"] = h.number
        table["3"] = h.number
    table["<"] = h.left_angle
    table["`"] = h.backtick

    trigger_re = re.compile("[" + "".join(re.escape(ch) for ch in sorted(table)) + "]")
    return DispatchTable(handlers=MappingProxyType(table), trigger_re=trigger_re)
