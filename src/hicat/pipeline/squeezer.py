# topmark:header:start
#
#   project      : HiCat
#   file         : squeezer.py
#   file_relpath : src/hicat/pipeline/squeezer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Blank-run squeezer: decide which units reach the write stage.

The squeezer turns line fragments into `RenderUnit`s. It runs *before*
escaping, highlighting and numbering, because a squeezed run of blank lines
is written as one opaque unit (and highlighted as one) rather than as many
individual blank lines.

State is a single counter of pending blank fragments, local to one call of
`squeeze_blank_runs`, so nothing leaks between files.

Transitions per fragment:

| fragment  | squeeze | pending | emitted                                   |
|-----------|---------|---------|-------------------------------------------|
| blank     | off     | any     | the fragment as a ``BLANK`` unit           |
| blank     | on      | any     | nothing (pending += 1)                     |
| non-blank | any     | > 0     | ``"\n" * N`` as ``BLANK_RUN``, then ``LINE`` |
| non-blank | any     | 0       | the fragment as a ``LINE`` unit            |

At end of input a non-zero pending run is flushed the same way. ``N`` is 1
when squeezing, otherwise the number of accumulated fragments.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from hicat.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from hicat.config.logging import HicatLogger
    from hicat.pipeline.segmenter import LineFragment

logger: HicatLogger = get_logger(__name__)


class UnitKind(Enum):
    """What a render unit stands for."""

    LINE = "line"
    BLANK = "blank"
    BLANK_RUN = "blank-run"

    @property
    def is_numbered(self) -> bool:
        """Only non-blank lines take a line number."""
        return self is UnitKind.LINE


@dataclass(frozen=True, slots=True)
class RenderUnit:
    """A piece of text that is escaped, highlighted, numbered and written as a whole.

    Attributes:
        text (str): Unit text (a fragment, or repeated newlines for a flushed run).
        kind (UnitKind): Unit classification; decides numbering.
    """

    text: str
    kind: UnitKind


def blank_run_text(pending: int, *, enabled: bool) -> str:
    """Return the text written when flushing ``pending`` blank fragments."""
    return "\n" * (1 if enabled else pending)


def squeeze_blank_runs(
    fragments: Iterable[LineFragment],
    *,
    enabled: bool,
) -> Iterator[RenderUnit]:
    """Yield render units for ``fragments``, collapsing blank runs when ``enabled``.

    Args:
        fragments (Iterable[LineFragment]): Fragments in source order.
        enabled (bool): Whether consecutive blank fragments collapse to one.

    Yields:
        RenderUnit: Units in output order.
    """
    pending: int = 0

    for fragment in fragments:
        if fragment.is_blank:
            if not enabled:
                yield RenderUnit(fragment.text, UnitKind.BLANK)
                continue
            pending += 1
            continue

        if pending > 0:
            logger.trace("flushing blank run of %d fragment(s)", pending)
            yield RenderUnit(blank_run_text(pending, enabled=enabled), UnitKind.BLANK_RUN)
            pending = 0

        yield RenderUnit(fragment.text, UnitKind.LINE)

    if pending > 0:
        logger.trace("flushing trailing blank run of %d fragment(s)", pending)
        yield RenderUnit(blank_run_text(pending, enabled=enabled), UnitKind.BLANK_RUN)
