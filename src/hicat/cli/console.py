# topmark:header:start
#
#   project      : HiCat
#   file         : console.py
#   file_relpath : src/hicat/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console for HiCat's own messages.

Rendered file contents never pass through `ClickConsole`; the engine writes
them to the stdout text stream directly. The console carries everything
else: listings and config dumps on stdout, and warnings, errors and per-file
summaries on stderr.
"""

from __future__ import annotations

import sys
from typing import TextIO

import click


class ClickConsole:
    """Thin wrapper over `click.echo` with a fixed color decision.

    Attributes:
        enable_color (bool): Keep ANSI styling in messages; when False Click
            strips it.
        out (TextIO): Stream for listings and dumps.
        err (TextIO): Stream for diagnostics and summaries.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to the output stream."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def status(self, text: str) -> None:
        """Write a pre-styled status line (a file summary) to stderr."""
        click.echo(text, file=self.err, color=self.enable_color)

    def warn(self, text: str) -> None:
        """Write a warning to stderr in yellow."""
        click.secho(text, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str) -> None:
        """Write an error to stderr in bright red."""
        click.secho(text, file=self.err, color=self.enable_color, fg="bright_red")
