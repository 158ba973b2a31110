# topmark:header:start
#
#   project      : HiCat
#   file         : test_ansi.py
#   file_relpath : tests/highlight/test_ansi.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the 24-bit SGR span encoder."""

from __future__ import annotations

import pytest

from hicat.highlight.ansi import RESET, encode_spans, sgr_params, strip_sgr
from hicat.highlight.base import PLAIN_STYLE, SpanStyle, hex_to_rgb


def test_plain_spans_are_written_bare() -> None:
    assert encode_spans([(PLAIN_STYLE, "abc"), (PLAIN_STYLE, "\n")]) == "abc\n"


def test_foreground_and_attributes() -> None:
    style = SpanStyle(foreground=(1, 2, 3), bold=True, italic=True, underline=True)
    assert sgr_params(style) == ["1", "3", "4", "38;2;1;2;3"]
    assert encode_spans([(style, "x")]) == f"\x1b[1;3;4;38;2;1;2;3mx{RESET}"


def test_background_only_when_requested() -> None:
    style = SpanStyle(foreground=(9, 9, 9), background=(39, 40, 34))
    assert "48;2;39;40;34" not in encode_spans([(style, "x")])
    assert encode_spans([(style, "x")], background=True) == (
        f"\x1b[38;2;9;9;9;48;2;39;40;34mx{RESET}"
    )


def test_background_only_style_is_bare_without_background() -> None:
    style = SpanStyle(background=(0, 0, 0))
    assert encode_spans([(style, "x")]) == "x"


def test_empty_spans_are_dropped() -> None:
    red = SpanStyle(foreground=(255, 0, 0))
    assert encode_spans([(red, ""), (PLAIN_STYLE, "")]) == ""


def test_strip_sgr() -> None:
    red = SpanStyle(foreground=(255, 0, 0), bold=True)
    text = "héllo ^E\r\n"
    assert strip_sgr(encode_spans([(red, text[:3]), (PLAIN_STYLE, text[3:])])) == text


def test_hex_to_rgb() -> None:
    assert hex_to_rgb("#f8f8f2") == (248, 248, 242)
    assert hex_to_rgb("fff") == (255, 255, 255)
    assert hex_to_rgb("") is None
    assert hex_to_rgb(None) is None
    with pytest.raises(ValueError):
        hex_to_rgb("#12345")


def test_plain_style() -> None:
    assert PLAIN_STYLE.is_plain
    assert not SpanStyle(bold=True).is_plain
