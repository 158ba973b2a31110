# topmark:header:start
#
#   project      : HiCat
#   file         : contracts.py
#   file_relpath : src/hicat/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contracts for pipeline steps (engine-facing).

Steps are instantiated objects that are *callable*; the runner invokes them as
``step(ctx)`` where ``ctx`` is a `RenderContext`.

Lifecycle
---------
1) ``step.may_proceed(ctx)`` gates execution.
2) If allowed, ``step.run(ctx)`` mutates ``ctx`` in place.
3) Regardless, ``step.hint(ctx)`` may attach non-binding diagnostics.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from hicat.pipeline.context import RenderContext


class Step(Protocol):
    """Protocol for a single pipeline step.

    Implementations typically subclass `hicat.pipeline.steps.base.BaseStep`.
    """

    name: str

    def __call__(self, ctx: RenderContext) -> RenderContext:
        """Run the full step lifecycle on ``ctx`` and return it."""
        ...

    def may_proceed(self, ctx: RenderContext) -> bool:
        """Return whether the step should run given the current context."""
        ...

    def run(self, ctx: RenderContext) -> None:
        """Execute the step, mutating the context in place.

        Expected failures (unreadable input) must update the status axis and
        diagnostics instead of raising. Write errors on the sink propagate.
        """
        ...

    def hint(self, ctx: RenderContext) -> None:
        """Attach non-binding diagnostics to the context."""
        ...
