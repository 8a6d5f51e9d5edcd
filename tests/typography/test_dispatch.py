from __future__ import annotations

import pytest

from multimark.typography import handlers as h
from multimark.typography.config import TypographyConfig
from multimark.typography.dispatch import build_dispatch
from multimark.typography.engine import SmartypantsRenderer


def test_default_table_entries() -> None:
    table = build_dispatch(TypographyConfig()).handlers
    assert table['"'] is h.double_quote
    assert table["&"] is h.ampersand
    assert table["'"] is h.single_quote
    assert table["-"] is h.dash
    assert table["1"] is h.number
    assert table["3"] is h.number
    assert "2" not in table
    assert "a" not in table


def test_table_follows_configuration() -> None:
    table = build_dispatch(TypographyConfig(angled_quotes=True, latex_dashes=True, fractions=True)).handlers
    assert table['"'] is h.angled_double_quote
    assert table["-"] is h.dash_latex
    assert all(table[ch] is h.number_generic for ch in "123456789")
    assert "0" not in table

    assert "-" not in build_dispatch(TypographyConfig(dashes=False)).handlers


def test_table_is_shared_and_read_only() -> None:
    a = SmartypantsRenderer(TypographyConfig())
    b = SmartypantsRenderer(TypographyConfig())
    assert a._dispatch is b._dispatch

    with pytest.raises(TypeError):
        a._dispatch.handlers["x"] = h.period  # type: ignore[index]


def test_trigger_pattern_matches_exactly_the_table_keys() -> None:
    table = build_dispatch(TypographyConfig())
    for ch in "\"&'(-.13<`":
        assert table.trigger_re.fullmatch(ch)
    for ch in "abc2)]/":
        assert table.trigger_re.fullmatch(ch) is None
