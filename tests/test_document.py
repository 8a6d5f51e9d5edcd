from __future__ import annotations

from multimark.document import convert_markdown, split_blocks
from multimark.typography.config import TypographyConfig


def test_split_blocks_on_blank_lines_and_headings() -> None:
    text = "# Title\npara one\nstill one\n\n\npara two\n## Sub\n"
    assert split_blocks(text) == ["# Title\n", "para one\nstill one\n", "para two\n", "## Sub\n"]


def test_convert_heading_and_paragraph() -> None:
    res = convert_markdown('# Title\n\nHe said "hi".\n')
    assert res.html == "<h1>Title</h1>\n<p>He said &ldquo;hi&rdquo;.</p>\n"
    assert res.stats["headings"] == 1
    assert res.stats["paragraphs"] == 1
    assert res.stats["ampersand"] == 2


def test_heading_closing_hashes_are_dropped() -> None:
    assert convert_markdown("### A -- B ###").html == "<h3>A &mdash; B</h3>\n"


def test_hashtag_is_not_a_heading() -> None:
    assert convert_markdown("#hashtag").html == "<p>#hashtag</p>\n"


def test_quote_state_spans_the_document() -> None:
    assert convert_markdown('"\n\n"').html == "<p>&ldquo;</p>\n<p>&rdquo;</p>\n"


def test_crlf_input_is_normalized() -> None:
    assert convert_markdown("a\r\nb\r\n\r\nc").html == "<p>a\nb</p>\n<p>c</p>\n"


def test_code_spans_are_counted_and_config_applies() -> None:
    res = convert_markdown("Take `3/4` or 3/4 cup", TypographyConfig(fractions=True))
    assert res.html == "<p>Take <code>3/4</code> or <sup>3</sup>&frasl;<sub>4</sub> cup</p>\n"
    assert res.stats["code_spans"] == 1
    assert res.stats["number_generic"] == 1


def test_empty_document() -> None:
    res = convert_markdown("")
    assert res.html == ""
    assert res.stats == {}


def test_quote_padding_applies_to_escaped_document_quotes() -> None:
    res = convert_markdown('"a"', TypographyConfig(quotes_nbsp=True))
    assert res.html == "<p>&nbsp;&ldquo;a&rdquo;&nbsp;</p>\n"
