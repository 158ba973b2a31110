# topmark:header:start
#
#   project      : HiCat
#   file         : options.py
#   file_relpath : src/hicat/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the HiCat command.

This module centralizes the reusable option groups (rendering, highlighting,
config, verbosity, color) and their resolution logic, so the command body can
stay thin.

Note that ``-v`` means ``--show-nonprinting`` (as in ``cat``); verbosity is
only available in its long form ``--verbose``.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Any, Callable, ParamSpec, TypeVar

import click

from hicat.cli.errors import HicatUsageError

P = ParamSpec("P")
R = TypeVar("R")


# Program-output verbosity levels
QUIET: int = -1
NORMAL: int = 0
SUMMARY: int = 1
DETAILED: int = 2

CONTEXT_SETTINGS: dict[str, Any] = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``--verbose``/``--quiet`` counts.

    Args:
        verbose_count (int): Number of times ``--verbose`` is passed.
        quiet_count (int): Number of times ``-q``/``--quiet`` is passed.

    Returns:
        int: `QUIET` (-1), `NORMAL` (0), `SUMMARY` (1) or `DETAILED` (2).

    Raises:
        HicatUsageError: If both flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise HicatUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return QUIET
    return min(verbose_count, DETAILED)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--verbose`` and ``-q/--quiet`` options to a command.

    ``--verbose`` prints a summary line per file on stderr; twice also lists
    each file's diagnostics. ``--quiet`` hides warnings (errors still show).
    """
    f = click.option(
        "--verbose",
        "verbose",
        count=True,
        help="Print a summary per file on stderr. Specify twice for diagnostics.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        "quiet",
        count=True,
        help="Suppress warnings; only errors are reported.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized console messages."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stream_isatty: bool | None = None,
) -> bool:
    """Determine whether console messages should be colored.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from CLI options.
        stream_isatty (bool | None): Whether stderr is a TTY; if None, auto-detected.

    Returns:
        bool: True if color output should be enabled, False otherwise.

    Behavior:
        Honors ``--color`` and ``--no-color``, then the ``FORCE_COLOR`` and
        ``NO_COLOR`` environment variables, and defaults to enabling color if
        stderr is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stream_isatty is None:
        try:
            stream_isatty = sys.stderr.isatty()
        except (AttributeError, ValueError):
            stream_isatty = False
    return bool(stream_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command.

    These style console messages only; syntax highlighting of rendered
    content is controlled by ``--syntax-highlight``.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color console messages: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable colored console messages (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-config``, ``--config`` and ``--dump-config`` options to a command."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore user and project config files (only use defaults).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    f = click.option(
        "--dump-config",
        "dump_config",
        is_flag=True,
        help=(
            "Print the effective configuration as TOML and exit. "
            "FILES are ignored; flags given on the command line are included."
        ),
    )(f)
    return f


def common_render_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``cat``-style rendering flags to a command."""
    f = click.option(
        "-b",
        "--number-nonblank",
        "number_lines",
        is_flag=True,
        help="Number non-blank output lines, starting at 1 for each file.",
    )(f)
    f = click.option(
        "-s",
        "--squeeze-blank",
        "squeeze_blank",
        is_flag=True,
        help="Suppress repeated blank output lines.",
    )(f)
    f = click.option(
        "-v",
        "--show-nonprinting",
        "show_non_printing",
        is_flag=True,
        help="Show ^K ^L ^N ^O ^E ^? for the corresponding control characters.",
    )(f)
    return f


def common_highlight_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the syntax-highlighting options to a command."""
    f = click.option(
        "-S",
        "--syntax-highlight",
        "syntax_highlight",
        is_flag=True,
        help="Highlight output with 24-bit terminal colors.",
    )(f)
    f = click.option(
        "-l",
        "--language",
        "language",
        metavar="NAME",
        default=None,
        help="Grammar to highlight with (overrides file name detection).",
    )(f)
    f = click.option(
        "-t",
        "--theme",
        "theme",
        metavar="NAME",
        default=None,
        help="Color theme (see --list-themes).",
    )(f)
    f = click.option(
        "--background",
        "background",
        is_flag=True,
        help="Also paint the theme's background color.",
    )(f)
    return f


def common_listing_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--list-themes`` and ``--list-languages`` to a command."""
    f = click.option(
        "--list-themes",
        "list_themes",
        is_flag=True,
        help="List available color themes and exit.",
    )(f)
    f = click.option(
        "--list-languages",
        "list_languages",
        is_flag=True,
        help="List available grammars and their aliases and exit.",
    )(f)
    return f
