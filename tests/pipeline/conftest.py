# topmark:header:start
#
#   project      : HiCat
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for render pipeline tests."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Any

from hicat.highlight.base import PLAIN_STYLE, SpanStyle
from hicat.pipeline.engine import render_text
from tests.conftest import make_config

if TYPE_CHECKING:
    from collections.abc import Sequence

    from hicat.highlight.base import LineHighlighter, Span
    from hicat.pipeline.context import RenderContext

RED: SpanStyle = SpanStyle(foreground=(255, 0, 0))


class RedHighlighter:
    """Colors every span red and records what it was asked to highlight."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def highlight(self, line: str) -> Sequence[Span]:
        self.calls.append(line)
        return [(RED, line)]


class SplittingHighlighter:
    """Returns one plain span per character (plus an empty span)."""

    def highlight(self, line: str) -> Sequence[Span]:
        return [(PLAIN_STYLE, "")] + [(RED, ch) for ch in line]


class FailingHighlighter:
    """Raises after ``ok_calls`` successful calls."""

    def __init__(self, ok_calls: int = 0) -> None:
        self.ok_calls = ok_calls
        self.calls = 0

    def highlight(self, line: str) -> Sequence[Span]:
        self.calls += 1
        if self.calls > self.ok_calls:
            raise RuntimeError("grammar exploded")
        return [(RED, line)]


def render(
    text: str,
    *,
    highlighter: LineHighlighter | None = None,
    **overrides: Any,
) -> tuple[str, RenderContext]:
    """Render ``text`` with config ``overrides`` into a string sink."""
    sink = io.StringIO()
    ctx: RenderContext = render_text(
        text,
        make_config(**overrides),
        sink=sink,
        highlighter=highlighter,
    )
    return sink.getvalue(), ctx
