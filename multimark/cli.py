"""Convert a markdown file to HTML with typographic punctuation.

Usage:
  multimark research.notes.md article.html
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from multimark.document import convert_markdown
from multimark.logging_setup import configure_console_logging
from multimark.typography.config import TypographyConfig

logger = logging.getLogger(__name__)


def _decode_text(data: bytes) -> str:
    for enc in ("utf-8-sig", "gb18030"):
        try:
            return data.decode(enc)
        except Exception:
            continue
    return data.decode("utf-8", errors="replace")


def _config_from_args(args: argparse.Namespace) -> TypographyConfig:
    base = TypographyConfig.from_env()
    return TypographyConfig(
        angled_quotes=args.angled_quotes or base.angled_quotes,
        quotes_nbsp=args.quotes_nbsp or base.quotes_nbsp,
        dashes=base.dashes and not args.no_dashes,
        latex_dashes=args.latex_dashes or base.latex_dashes,
        fractions=args.fractions or base.fractions,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="multimark",
        description="Render markdown to HTML with curly quotes, dashes, ellipses and fractions.",
    )
    parser.add_argument("input", type=Path, help="Markdown file to read")
    parser.add_argument("output", type=Path, nargs="?", help="HTML file to write (default: stdout)")
    parser.add_argument("--angled-quotes", action="store_true", help="Use guillemets for double quotes")
    parser.add_argument("--quotes-nbsp", action="store_true", help="Pad double quotes with non-breaking spaces")
    parser.add_argument("--no-dashes", action="store_true", help="Leave hyphens alone")
    parser.add_argument("--latex-dashes", action="store_true", help="'---' is an em dash and '--' an en dash")
    parser.add_argument("--fractions", action="store_true", help="Render any digits/digits as a fraction")
    parser.add_argument("--log-level", default="warning", choices=["critical", "error", "warning", "info", "debug"])
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    configure_console_logging(args.log_level)

    try:
        source = _decode_text(args.input.read_bytes())
    except OSError as e:
        logger.error("failed to read markdown file %s: %s", args.input, e)
        return 1
    logger.info("loaded markdown file: %s (%s chars)", args.input, len(source))

    result = convert_markdown(source, _config_from_args(args))

    if args.output is None:
        sys.stdout.write(result.html)
        return 0

    try:
        args.output.write_text(result.html, encoding="utf-8")
    except OSError as e:
        logger.error("failed to write HTML file %s: %s", args.output, e)
        return 1
    logger.info("wrote HTML file: %s", args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
