from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from multimark.inline.render import render_inline
from multimark.typography.config import TypographyConfig
from multimark.typography.engine import SmartypantsRenderer

logger = logging.getLogger(__name__)

_atx_heading_re = re.compile(r"^ {0,3}(#{1,6})(?:[ \t]+(.*?))?(?:[ \t]+#+)?[ \t]*$")


@dataclass
class ConvertResult:
    html: str
    stats: dict[str, int]


def split_blocks(text: str) -> list[str]:
    """Split text into blocks separated by blank lines.

    An ATX heading line is always a block of its own.
    """

    blocks: list[str] = []
    buf: list[str] = []

    def flush() -> None:
        nonlocal buf
        if buf:
            blocks.append("".join(buf))
        buf = []

    for line in text.splitlines(keepends=True):
        if line.strip() == "":
            flush()
            continue
        if _atx_heading_re.match(line.rstrip("\n")):
            flush()
            blocks.append(line)
            continue
        buf.append(line)

    flush()
    return blocks


def convert_markdown(text: str, config: TypographyConfig | None = None) -> ConvertResult:
    """Convert a markdown document made of paragraphs and ATX headings to HTML.

    A single renderer serves the whole document so quote pairing carries over
    from block to block.
    """

    stats: dict[str, int] = {}
    if "\r\n" in text or "\r" in text:
        text = text.replace("\r\n", "\n").replace("\r", "\n")

    renderer = SmartypantsRenderer(config)
    out: list[str] = []

    for block in split_blocks(text):
        m = _atx_heading_re.match(block.rstrip("\n"))
        if m:
            level = len(m.group(1))
            body = render_inline(m.group(2) or "", renderer, stats)
            out.append(f"<h{level}>{body}</h{level}>\n")
            stats["headings"] = stats.get("headings", 0) + 1
            continue

        lines = [line.strip() for line in block.split("\n")]
        body = render_inline("\n".join(line for line in lines if line), renderer, stats)
        out.append(f"<p>{body}</p>\n")
        stats["paragraphs"] = stats.get("paragraphs", 0) + 1

    for k, v in renderer.stats.items():
        stats[k] = stats.get(k, 0) + v

    logger.debug("converted %s blocks: %s", len(out), stats)
    return ConvertResult(html="".join(out), stats=stats)
