# topmark:header:start
#
#   project      : HiCat
#   file         : base.py
#   file_relpath : src/hicat/highlight/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Highlighter capability contract.

The render pipeline depends only on `LineHighlighter`: a single
``highlight(line)`` operation returning styled spans whose texts concatenate
to ``line`` exactly. Grammar and theme are bound when the highlighter is
constructed. Any conforming object can be substituted, including the
`PlainHighlighter` passthrough.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Tuple

if TYPE_CHECKING:
    from collections.abc import Sequence

RGB = Tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class SpanStyle:
    """Visual attributes of a highlighted span.

    Attributes:
        foreground (RGB | None): 24-bit foreground color.
        background (RGB | None): 24-bit background color.
        bold (bool): Bold text.
        italic (bool): Italic text.
        underline (bool): Underlined text.
    """

    foreground: RGB | None = None
    background: RGB | None = None
    bold: bool = False
    italic: bool = False
    underline: bool = False

    @property
    def is_plain(self) -> bool:
        """True if the style carries no visual attribute at all."""
        return self == PLAIN_STYLE


PLAIN_STYLE: SpanStyle = SpanStyle()

Span = Tuple[SpanStyle, str]


class LineHighlighter(Protocol):
    """Capability that maps a line of text to styled spans."""

    def highlight(self, line: str) -> Sequence[Span]:
        """Return styled spans covering ``line``.

        Args:
            line (str): Text to highlight, terminator included.

        Returns:
            Sequence[Span]: ``(style, text)`` pairs; the texts, concatenated in
            order, must equal ``line``.
        """
        ...


class PlainHighlighter:
    """Highlighter that returns the whole line as a single unstyled span."""

    def highlight(self, line: str) -> Sequence[Span]:
        """Return ``[(PLAIN_STYLE, line)]``."""
        return [(PLAIN_STYLE, line)]


def hex_to_rgb(value: str | None) -> RGB | None:
    """Convert ``"rrggbb"`` / ``"#rgb"`` style color strings to an RGB tuple.

    Returns None for empty values.
    """
    if not value:
        return None
    h: str = value.lstrip("#")
    if len(h) == 3:
        h = "".join(c * 2 for c in h)
    if len(h) != 6:
        raise ValueError(f"Invalid color value: {value!r}")
    return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))
