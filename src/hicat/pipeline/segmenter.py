# topmark:header:start
#
#   project      : HiCat
#   file         : segmenter.py
#   file_relpath : src/hicat/pipeline/segmenter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Split a text buffer into line fragments that keep their terminators.

Only ``"\n"`` terminates a fragment. ``str.splitlines`` is deliberately not
used: it also breaks on ``\r``, ``\x0b``, ``\x0c`` and ``\x1c``–``\x1e``, which
would split lines at characters the escaper is supposed to render visibly.

Concatenating every fragment reproduces the input exactly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__: list[str] = [
    "LineFragment",
    "LineSegments",
    "segment",
]

NEWLINE: str = "\n"

# Unicode White_Space characters. ``str.strip()`` also removes the
# information separators U+001C..U+001F, which are not blank.
WHITESPACE: str = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


@dataclass(frozen=True, slots=True)
class LineFragment:
    """One line of source text, including its ``\\n`` terminator when present.

    Attributes:
        text (str): Raw fragment text.
    """

    text: str

    @property
    def is_blank(self) -> bool:
        """True if the fragment is whitespace only (terminator included)."""
        return not self.text.strip(WHITESPACE)

    @property
    def has_terminator(self) -> bool:
        """True if the fragment ends with a newline."""
        return self.text.endswith(NEWLINE)


class LineSegments:
    """Lazy, restartable sequence of `LineFragment` over one text buffer.

    Every call to ``iter()`` starts a fresh scan, so the same instance can be
    consumed more than once.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        self._text = text

    def __iter__(self) -> Iterator[LineFragment]:
        text: str = self._text
        start: int = 0
        end: int = len(text)
        while start < end:
            nl: int = text.find(NEWLINE, start)
            if nl == -1:
                yield LineFragment(text[start:])
                return
            yield LineFragment(text[start : nl + 1])
            start = nl + 1

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(<{len(self._text)} chars>)"


def segment(text: str) -> Iterator[LineFragment]:
    """Return a fresh iterator over the fragments of ``text``."""
    return iter(LineSegments(text))
