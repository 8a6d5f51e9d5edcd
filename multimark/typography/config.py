from __future__ import annotations

from dataclasses import dataclass

from multimark.env import env_bool


@dataclass(frozen=True)
class TypographyConfig:
    # Quote rules
    angled_quotes: bool = False  # &laquo;/&raquo; instead of &ldquo;/&rdquo;
    quotes_nbsp: bool = False

    # Dash rules
    dashes: bool = True
    latex_dashes: bool = False  # "---" em, "--" en

    # Off: only 1/2, 1/4 and 3/4 become fraction glyphs.
    fractions: bool = False

    @classmethod
    def from_env(cls) -> TypographyConfig:
        d = cls()
        return cls(
            angled_quotes=env_bool("MULTIMARK_ANGLED_QUOTES", d.angled_quotes),
            quotes_nbsp=env_bool("MULTIMARK_QUOTES_NBSP", d.quotes_nbsp),
            dashes=env_bool("MULTIMARK_DASHES", d.dashes),
            latex_dashes=env_bool("MULTIMARK_LATEX_DASHES", d.latex_dashes),
            fractions=env_bool("MULTIMARK_FRACTIONS", d.fractions),
        )
