# topmark:header:start
#
#   project      : HiCat
#   file         : renderer.py
#   file_relpath : src/hicat/pipeline/steps/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Render step: the core line-rendering pass.

For every unit produced by the squeezer the step applies, in this order:

    escape (``show_non_printing``) → highlight (``syntax_highlight``)
        → number (``number_lines``, ``LINE`` units only) → write

Each unit is written to the sink as soon as it is final, and the sink is
flushed once after the last unit of the file. Numbers wrap the highlighted
text and are never colorized.

Errors raised by the sink propagate: a failed write ends the whole run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hicat.config.logging import get_logger
from hicat.highlight.adapter import HighlightAdapter
from hicat.pipeline.escaper import escape_non_printing
from hicat.pipeline.numberer import LineNumberer
from hicat.pipeline.segmenter import LineSegments
from hicat.pipeline.squeezer import squeeze_blank_runs
from hicat.pipeline.status import ReadStatus, RenderStatus
from hicat.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from hicat.config import Config
    from hicat.config.logging import HicatLogger
    from hicat.pipeline.context import RenderContext

logger: HicatLogger = get_logger(__name__)


class RenderStep(BaseStep):
    """Segment, squeeze, escape, highlight, number and write ``ctx.content``.

    Sets:
      - RenderStatus: {RENDERED, DEGRADED, SKIPPED}
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: RenderContext) -> bool:
        """Render only loaded content."""
        return (
            not ctx.flow.halt
            and ctx.content is not None
            and ctx.read_status in (ReadStatus.OK, ReadStatus.EMPTY)
        )

    def run(self, ctx: RenderContext) -> None:
        """Write the rendered units of ``ctx.content`` to ``ctx.sink``.

        Args:
            ctx (RenderContext): The render context for the current file.
        """
        assert ctx.content is not None
        config: Config = ctx.config

        numberer = LineNumberer(enabled=config.number_lines)
        adapter = HighlightAdapter(
            highlighter=ctx.highlighter,
            enabled=config.syntax_highlight,
            background=config.background,
        )

        for unit in squeeze_blank_runs(LineSegments(ctx.content), enabled=config.squeeze_blank):
            text: str = escape_non_printing(unit.text, config.show_non_printing)
            text = adapter.apply(text)
            if unit.kind.is_numbered:
                text = numberer.apply(text)
            ctx.sink.write(text)
            ctx.units_written += 1

        ctx.sink.flush()
        ctx.lines_numbered = numberer.lines_numbered

        if adapter.degraded:
            ctx.render_status = RenderStatus.DEGRADED
            ctx.add_warning(f"syntax highlighting disabled: {adapter.failure}")
        else:
            ctx.render_status = RenderStatus.RENDERED
        logger.debug(
            "%s: %d unit(s) written, %d line(s) numbered",
            ctx.path,
            ctx.units_written,
            ctx.lines_numbered,
        )

    def hint(self, ctx: RenderContext) -> None:
        """Mark contexts that never reached rendering as skipped."""
        if ctx.render_status == RenderStatus.PENDING and ctx.flow.halt:
            ctx.render_status = RenderStatus.SKIPPED
