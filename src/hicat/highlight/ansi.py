# topmark:header:start
#
#   project      : HiCat
#   file         : ansi.py
#   file_relpath : src/hicat/highlight/ansi.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Encode styled spans as 24-bit terminal escape sequences.

Each styled span is written as ``ESC[<params>m<text>ESC[0m``; unstyled spans
are written bare and empty spans are dropped. Only SGR sequences are added,
so removing them (see `strip_sgr`) yields the original text.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hicat.highlight.base import Span, SpanStyle

ESC: Final[str] = "\x1b"
RESET: Final[str] = f"{ESC}[0m"

_SGR_RE: Final[re.Pattern[str]] = re.compile(r"\x1b\[[0-9;]*m")


def sgr_params(style: SpanStyle, *, background: bool = False) -> list[str]:
    """Return the SGR parameters for ``style``.

    Args:
        style (SpanStyle): Span style.
        background (bool): Whether to include the background color.

    Returns:
        list[str]: Parameters such as ``["1", "38;2;248;248;242"]``.
    """
    params: list[str] = []
    if style.bold:
        params.append("1")
    if style.italic:
        params.append("3")
    if style.underline:
        params.append("4")
    if style.foreground is not None:
        r, g, b = style.foreground
        params.append(f"38;2;{r};{g};{b}")
    if background and style.background is not None:
        r, g, b = style.background
        params.append(f"48;2;{r};{g};{b}")
    return params


def encode_spans(spans: Iterable[Span], *, background: bool = False) -> str:
    """Encode ``spans`` as one string with embedded 24-bit color escapes.

    Args:
        spans (Iterable[Span]): ``(style, text)`` pairs in order.
        background (bool): Whether to paint span background colors.

    Returns:
        str: The encoded text.
    """
    out: list[str] = []
    for style, text in spans:
        if not text:
            continue
        params: list[str] = sgr_params(style, background=background)
        if not params:
            out.append(text)
            continue
        out.append(f"{ESC}[{';'.join(params)}m{text}{RESET}")
    return "".join(out)


def strip_sgr(text: str) -> str:
    """Remove SGR escape sequences from ``text``."""
    return _SGR_RE.sub("", text)
