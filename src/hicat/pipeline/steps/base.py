# topmark:header:start
#
#   project      : HiCat
#   file         : base.py
#   file_relpath : src/hicat/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: may_proceed → run? → hint
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hicat.config.logging import get_logger

if TYPE_CHECKING:
    from hicat.config.logging import HicatLogger
    from hicat.pipeline.context import RenderContext

logger: HicatLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclass this to implement a concrete step by overriding ``may_proceed()``,
    ``run()``, and optionally ``hint()``.

    Attributes:
        name (str): Stable step identifier for logs and halt reasons.
    """

    name: str

    def __call__(self, ctx: RenderContext) -> RenderContext:
        """Invoke the step lifecycle: gate → run (if allowed) → hint.

        Args:
            ctx (RenderContext): The render context for the current file.

        Returns:
            RenderContext: The same context instance after mutation.
        """
        ctx.steps.append(self)

        if self.may_proceed(ctx):
            logger.debug("step %s - running for %s", self.name, ctx.path)
            self.run(ctx)
            if ctx.flow.halt:
                logger.debug("pipeline halted by %s: %s", ctx.flow.at_step, ctx.flow.reason)
        else:
            logger.debug("step %s may not proceed for %s", self.name, ctx.path)

        self.hint(ctx)
        return ctx

    def may_proceed(self, ctx: RenderContext) -> bool:
        """Return whether the step should run; default: unless the flow was halted."""
        return not ctx.flow.halt

    def run(self, ctx: RenderContext) -> None:
        """Perform the step's primary work, mutating ``ctx`` in place."""
        pass

    def hint(self, ctx: RenderContext) -> None:
        """Attach non-binding diagnostics to ``ctx`` (optional)."""
        pass
