# topmark:header:start
#
#   project      : HiCat
#   file         : errors.py
#   file_relpath : src/hicat/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the HiCat CLI.

Usage:
    Raise these exceptions in the command body to signal errors with
    standardized messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from hicat.core.exit_codes import ExitCode


class HicatError(click.ClickException):
    """Base class for all HiCat CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"hicat: {self.format_message()}")
                return
        super().show(file)


class HicatUsageError(HicatError):
    """Error for command-line invocation errors (conflicting flags)."""

    exit_code = ExitCode.USAGE_ERROR


class HicatConfigError(HicatError):
    """Error for configuration errors (unreadable/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class HicatIOError(HicatError):
    """Error for I/O errors writing rendered output."""

    exit_code = ExitCode.IO_ERROR
