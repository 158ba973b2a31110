# topmark:header:start
#
#   project      : HiCat
#   file         : runner.py
#   file_relpath : src/hicat/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the render pipeline for a single file."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hicat.pipeline.steps.reader import ReaderStep
from hicat.pipeline.steps.renderer import RenderStep

if TYPE_CHECKING:
    from collections.abc import Sequence

    from hicat.pipeline.context import RenderContext
    from hicat.pipeline.contracts import Step


def default_steps() -> list[Step]:
    """Return fresh instances of the standard pipeline: read, then render."""
    return [ReaderStep(), RenderStep()]


def run(ctx: RenderContext, steps: Sequence[Step]) -> RenderContext:
    """Execute the pipeline sequentially.

    Args:
        ctx (RenderContext): Render context for the current file.
        steps (Sequence[Step]): Ordered pipeline steps.

    Returns:
        RenderContext: The final context after all steps have run.
    """
    for step in steps:
        ctx = step(ctx)
    return ctx
