# topmark:header:start
#
#   project      : HiCat
#   file         : main.py
#   file_relpath : src/hicat/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HiCat command line: ``hicat [OPTIONS] [FILES]...``.

Key ideas:
- Verbosity, color and the console are initialized once and placed into
  ``ctx.obj``.
- The configuration is merged from defaults, config files and CLI flags, then
  frozen before any file is read.
- Rendered content is written to the stdout text stream; everything else
  (warnings, errors, summaries) goes to stderr via `ClickConsole`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from hicat.cli.console import ClickConsole
from hicat.cli.errors import HicatConfigError, HicatIOError
from hicat.cli.options import (
    CONTEXT_SETTINGS,
    DETAILED,
    NORMAL,
    SUMMARY,
    ColorMode,
    common_color_options,
    common_config_options,
    common_highlight_options,
    common_listing_options,
    common_render_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from hicat.config import Config, ConfigValueError, MutableConfig
from hicat.config.io import to_toml
from hicat.config.logging import get_logger, resolve_env_log_level, setup_logging
from hicat.constants import HICAT_VERSION, STDIN_PATH
from hicat.core.diagnostics import DiagnosticLevel
from hicat.core.exit_codes import ExitCode
from hicat.highlight.pygments_backend import available_languages, available_themes
from hicat.pipeline.engine import render_files

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import TextIO

    from hicat.config import ArgsLike
    from hicat.config.logging import HicatLogger
    from hicat.core.diagnostics import Diagnostic
    from hicat.pipeline.context import RenderContext

logger: HicatLogger = get_logger(__name__)

# Markers around `--dump-config` output
CONFIG_DUMP_BEGIN: str = "# === BEGIN ==="
CONFIG_DUMP_END: str = "# === END ==="


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``--verbose`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via the environment only
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode: ColorMode = (
        ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


def build_config(
    *,
    cli_args: ArgsLike,
    config_paths: Iterable[str],
    no_config: bool,
) -> Config:
    """Merge config layers and CLI overrides into a frozen `Config`.

    Raises:
        HicatConfigError: If a config file is unreadable or malformed.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            anchor=Path.cwd(),
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
    except ConfigValueError as e:
        raise HicatConfigError(str(e)) from e
    draft.apply_cli_args(cli_args)
    config: Config = draft.freeze()
    logger.debug("effective config from %s", ", ".join(str(p) for p in config.config_files))
    return config


def report_diagnostics(
    console: ClickConsole,
    diagnostics: Iterable[Diagnostic],
    *,
    verbosity_level: int,
) -> None:
    """Print warnings and errors on stderr; warnings are hidden by ``--quiet``."""
    for d in diagnostics:
        if d.level == DiagnosticLevel.ERROR:
            console.error(f"hicat: {d.message}")
        elif d.level == DiagnosticLevel.WARNING and verbosity_level >= NORMAL:
            console.warn(f"hicat: {d.message}")


def _silence_stdout() -> None:
    """Point stdout at devnull so interpreter shutdown does not hit the closed pipe again."""
    try:
        devnull: int = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError) as e:
        # Streams without a file descriptor (e.g. when captured)
        logger.debug("could not redirect stdout after broken pipe: %s", e)


@click.command(
    context_settings=CONTEXT_SETTINGS,
    help=(
        "Concatenate FILES to standard output, optionally numbering non-blank lines, "
        "squeezing blank runs, showing non-printing characters and highlighting syntax.\n\n"
        "With no FILES, or when a FILE is -, read standard input."
    ),
)
@click.argument(
    "files",
    nargs=-1,
    type=click.Path(dir_okay=True, allow_dash=True),
)
@common_render_options
@common_highlight_options
@common_config_options
@common_listing_options
@common_verbose_options
@common_color_options
@click.version_option(HICAT_VERSION, "--version", prog_name="hicat")
@click.pass_context
def cli(
    ctx: click.Context,
    files: tuple[str, ...],
    number_lines: bool,
    squeeze_blank: bool,
    show_non_printing: bool,
    syntax_highlight: bool,
    language: str | None,
    theme: str | None,
    background: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
    dump_config: bool,
    list_themes: bool,
    list_languages: bool,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the HiCat CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]
    verbosity_level: int = ctx.obj["verbosity_level"]

    if list_themes:
        for name in available_themes():
            console.print(name)
        return
    if list_languages:
        for name, aliases in available_languages():
            console.print(f"{name}: {', '.join(aliases)}" if aliases else name)
        return

    # Flags that were not given inherit the merged config value
    config: Config = build_config(
        cli_args={
            "number_lines": number_lines or None,
            "squeeze_blank": squeeze_blank or None,
            "show_non_printing": show_non_printing or None,
            "syntax_highlight": syntax_highlight or None,
            "language": language,
            "theme": theme,
            "background": background or None,
        },
        config_paths=config_paths,
        no_config=no_config,
    )
    report_diagnostics(console, config.diagnostics, verbosity_level=verbosity_level)

    if dump_config:
        if files:
            console.warn("hicat: --dump-config ignores FILES")
        console.print(CONFIG_DUMP_BEGIN)
        console.print(to_toml(config.to_toml_dict()), nl=False)
        console.print(CONFIG_DUMP_END)
        return

    paths: list[str] = list(files) or [STDIN_PATH]
    sink: TextIO = click.get_text_stream("stdout")

    try:
        results, error_code = render_files(paths, config, sink=sink)
    except BrokenPipeError:
        # The reader went away (e.g. `hicat big.txt | head`): stop quietly
        _silence_stdout()
        ctx.exit(ExitCode.SUCCESS)
    except OSError as e:
        raise HicatIOError(f"write error: {e.strerror or e}") from e

    _report_results(console, results, verbosity_level=verbosity_level)

    if error_code is not None:
        ctx.exit(int(error_code))


def _report_results(
    console: ClickConsole,
    results: list[RenderContext],
    *,
    verbosity_level: int,
) -> None:
    for r in results:
        if verbosity_level >= DETAILED:
            # The summary lists every diagnostic below the file line
            console.status(r.format_summary(show_diagnostics=True))
            continue
        report_diagnostics(console, r.diagnostics, verbosity_level=verbosity_level)
        if verbosity_level >= SUMMARY:
            console.status(r.format_summary())


if __name__ == "__main__":
    cli()
