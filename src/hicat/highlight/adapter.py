# topmark:header:start
#
#   project      : HiCat
#   file         : adapter.py
#   file_relpath : src/hicat/highlight/adapter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Highlight adapter: apply a `LineHighlighter` to render units.

The adapter receives unit text that is already escaped (and, for a flushed
blank run, already collapsed) and returns it either unchanged or encoded with
24-bit color escapes. Line numbers are added *after* this stage, so they are
never colorized.

A highlighter that raises degrades the adapter: the failing unit and every
later unit of the same pass are written unhighlighted, and the failure is
recorded in ``failure``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hicat.config.logging import get_logger
from hicat.highlight.ansi import encode_spans

if TYPE_CHECKING:
    from collections.abc import Sequence

    from hicat.config.logging import HicatLogger
    from hicat.highlight.base import LineHighlighter, Span

logger: HicatLogger = get_logger(__name__)


@dataclass
class HighlightAdapter:
    """Per-pass wrapper around a highlighter capability.

    Attributes:
        highlighter (LineHighlighter | None): Capability; None disables highlighting.
        enabled (bool): The syntax-highlight flag.
        background (bool): Whether to paint span background colors.
        failure (Exception | None): First highlighter error, once degraded.
    """

    highlighter: LineHighlighter | None
    enabled: bool = False
    background: bool = False
    failure: Exception | None = None

    @property
    def active(self) -> bool:
        """True while units are actually being highlighted."""
        return self.enabled and self.highlighter is not None and self.failure is None

    @property
    def degraded(self) -> bool:
        """True once a highlighter error disabled highlighting for this pass."""
        return self.failure is not None

    def apply(self, text: str) -> str:
        """Return ``text`` highlighted, or unchanged when inactive.

        Args:
            text (str): Escaped unit text, terminator included.

        Returns:
            str: Text with embedded color escapes, or ``text`` itself.
        """
        if not self.active:
            return text
        assert self.highlighter is not None
        try:
            spans: Sequence[Span] = self.highlighter.highlight(text)
        except Exception as e:
            logger.warning("Highlighter failed; continuing without highlighting: %s", e)
            self.failure = e
            return text
        return encode_spans(spans, background=self.background)
