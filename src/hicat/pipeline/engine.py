# topmark:header:start
#
#   project      : HiCat
#   file         : engine.py
#   file_relpath : src/hicat/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Execution helpers for rendering files (engine layer).

Both the CLI and API callers use these functions; they never print and never
import Click. Presentation (summaries, colors, exit) is the CLI's job.

Typical usage:

    results, err = render_files(["a.py", "b.txt"], config, sink=sys.stdout)
    if err is not None:
        # The CLI maps this to the process exit code.
        ...

Files are processed strictly in order and independently: every file gets a
fresh `RenderContext` (and so fresh counters), and a file that cannot be read
does not prevent the following files from being rendered.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TextIO

from hicat.config.logging import get_logger
from hicat.core.exit_codes import ExitCode
from hicat.highlight.pygments_backend import PygmentsHighlighter, is_known_theme
from hicat.pipeline import runner
from hicat.pipeline.context import RenderContext
from hicat.pipeline.status import ReadStatus
from hicat.pipeline.steps.renderer import RenderStep

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from hicat.config import Config
    from hicat.config.logging import HicatLogger
    from hicat.highlight.base import LineHighlighter
    from hicat.pipeline.contracts import Step

logger: HicatLogger = get_logger(__name__)

HighlighterFactory = Callable[[str, "Config"], "LineHighlighter"]


def pygments_highlighter(path: str, config: Config) -> LineHighlighter:
    """Default `HighlighterFactory`: a Pygments highlighter for ``path``."""
    return PygmentsHighlighter.for_file(path, language=config.language, theme=config.theme)


def _attach_highlighter(
    ctx: RenderContext,
    factory: HighlighterFactory,
) -> None:
    config: Config = ctx.config
    if not config.syntax_highlight:
        return
    if factory is pygments_highlighter and not is_known_theme(config.theme):
        ctx.add_warning(f"unknown theme '{config.theme}', using the default theme")
    ctx.highlighter = factory(ctx.path, config)


def render_files(
    paths: Iterable[Path | str],
    config: Config,
    *,
    sink: TextIO,
    stdin: TextIO | None = None,
    highlighter_factory: HighlighterFactory | None = None,
    steps: Callable[[], Sequence[Step]] = runner.default_steps,
) -> tuple[list[RenderContext], ExitCode | None]:
    """Render each file to ``sink`` and return ``(results, first_error_code)``.

    Args:
        paths (Iterable[Path | str]): Files to render, in order; ``-`` is stdin.
        config (Config): Frozen configuration for the whole run.
        sink (TextIO): Output stream receiving the rendered text.
        stdin (TextIO | None): Stream used for ``-`` (defaults to ``sys.stdin``).
        highlighter_factory (HighlighterFactory | None): Builds the per-file
            highlighter when highlighting is enabled (default: Pygments).
        steps (Callable[[], Sequence[Step]]): Factory for the per-file steps.

    Returns:
        tuple[list[RenderContext], ExitCode | None]: The per-file contexts, and
        the exit code of the first failing file (None if all succeeded).

    Raises:
        OSError: If writing to or flushing ``sink`` fails; the run stops.
    """
    factory: HighlighterFactory = highlighter_factory or pygments_highlighter
    results: list[RenderContext] = []
    encountered_error_code: ExitCode | None = None

    for path in paths:
        ctx: RenderContext = RenderContext.bootstrap(
            path=str(path),
            config=config,
            sink=sink,
            stdin=stdin,
        )
        try:
            _attach_highlighter(ctx, factory)
            ctx = runner.run(ctx, steps())
        except OSError:
            # Output failures are fatal for the whole run
            raise
        except Exception as e:
            logger.exception("Unexpected error rendering %s: %s", path, e)
            ctx.add_error(f"unexpected error: {e}")
            results.append(ctx)
            encountered_error_code = encountered_error_code or ExitCode.PIPELINE_ERROR
            continue

        results.append(ctx)
        if ctx.exit_code is not None:
            encountered_error_code = encountered_error_code or ctx.exit_code

    return results, encountered_error_code


def render_text(
    text: str,
    config: Config,
    *,
    sink: TextIO,
    highlighter: LineHighlighter | None = None,
    name: str = "<text>",
) -> RenderContext:
    """Render an in-memory buffer to ``sink``.

    Only the render step runs; ``highlighter`` is used as-is (no grammar
    detection) when ``config.syntax_highlight`` is set.

    Args:
        text (str): Contents to render.
        config (Config): Frozen configuration.
        sink (TextIO): Output stream.
        highlighter (LineHighlighter | None): Highlighter capability.
        name (str): Label used in logs and summaries.

    Returns:
        RenderContext: The finished context.
    """
    ctx: RenderContext = RenderContext.bootstrap(
        path=name,
        config=config,
        sink=sink,
        highlighter=highlighter,
    )
    ctx.content = text
    ctx.read_status = ReadStatus.OK if text else ReadStatus.EMPTY
    return runner.run(ctx, [RenderStep()])
