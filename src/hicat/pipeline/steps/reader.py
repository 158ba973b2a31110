# topmark:header:start
#
#   project      : HiCat
#   file         : reader.py
#   file_relpath : src/hicat/pipeline/steps/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reader step: load a file's contents into the render context.

Read failures never propagate: they set `ReadStatus`, add an error diagnostic
and halt the flow for this file, so the engine moves on to the next one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hicat.config.logging import get_logger
from hicat.pipeline.source import ReadError, ReadFailure, read_contents
from hicat.pipeline.status import ReadStatus
from hicat.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from hicat.config.logging import HicatLogger
    from hicat.pipeline.context import RenderContext

logger: HicatLogger = get_logger(__name__)

_FAILURE_STATUS: dict[ReadFailure, ReadStatus] = {
    ReadFailure.NOT_FOUND: ReadStatus.NOT_FOUND,
    ReadFailure.IS_DIRECTORY: ReadStatus.IS_DIRECTORY,
    ReadFailure.PERMISSION_DENIED: ReadStatus.NO_READ_PERMISSION,
    ReadFailure.NOT_TEXT: ReadStatus.UNICODE_DECODE_ERROR,
    ReadFailure.IO_ERROR: ReadStatus.UNREADABLE,
}


class ReaderStep(BaseStep):
    """Load the text buffer and set `ReadStatus`.

    Sets:
      - ReadStatus: {OK, EMPTY, NOT_FOUND, IS_DIRECTORY, NO_READ_PERMISSION,
                     UNICODE_DECODE_ERROR, UNREADABLE}
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: RenderContext) -> bool:
        """Read only once per context, and only while the flow is running."""
        return not ctx.flow.halt and ctx.read_status == ReadStatus.PENDING

    def run(self, ctx: RenderContext) -> None:
        """Read ``ctx.path`` into ``ctx.content``.

        Args:
            ctx (RenderContext): The render context for the current file.
        """
        try:
            ctx.content = read_contents(ctx.path, stdin=ctx.stdin)
        except ReadError as e:
            ctx.read_status = _FAILURE_STATUS[e.reason]
            logger.error("%s", e)
            ctx.add_error(str(e))
            ctx.stop_flow(reason=e.reason.name.lower().replace("_", "-"), at_step=self)
            return

        ctx.read_status = ReadStatus.OK if ctx.content else ReadStatus.EMPTY
        logger.debug("%s: %s", ctx.path, ctx.read_status.value)
