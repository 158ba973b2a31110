# topmark:header:start
#
#   project      : HiCat
#   file         : context.py
#   file_relpath : src/hicat/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render context model for the HiCat pipeline.

This module defines the state of a single file's render pass:

    RenderContext:
        Mutable container created fresh for every file. It carries the
        configuration, the output sink, the highlighter capability, status for
        the read and render axes, diagnostics and counters. Nothing in it
        survives to the next file.

    FlowControl:
        Small helper dataclass that allows a step to request early, graceful
        termination of the pipeline for the current file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TextIO

from yachalk import chalk

from hicat.config.logging import get_logger
from hicat.core.diagnostics import DiagnosticLevel, DiagnosticLog, compute_diagnostic_stats
from hicat.core.exit_codes import ExitCode
from hicat.pipeline.status import ReadStatus, RenderStatus

if TYPE_CHECKING:
    from hicat.config import Config
    from hicat.config.logging import HicatLogger
    from hicat.core.diagnostics import DiagnosticStats
    from hicat.highlight.base import LineHighlighter
    from hicat.pipeline.contracts import Step

logger: HicatLogger = get_logger(__name__)

__all__: list[str] = [
    "FlowControl",
    "RenderContext",
]

# Read failures and the process exit code they map to
_READ_STATUS_EXIT_CODES: dict[ReadStatus, ExitCode] = {
    ReadStatus.NOT_FOUND: ExitCode.FILE_NOT_FOUND,
    ReadStatus.IS_DIRECTORY: ExitCode.FILE_NOT_FOUND,
    ReadStatus.NO_READ_PERMISSION: ExitCode.PERMISSION_DENIED,
    ReadStatus.UNICODE_DECODE_ERROR: ExitCode.ENCODING_ERROR,
    ReadStatus.UNREADABLE: ExitCode.IO_ERROR,
}


@dataclass
class FlowControl:
    """Execution flow control for the current file."""

    halt: bool = False
    reason: str = ""  # short code, e.g. "not-found"
    at_step: str = ""  # step name that requested the halt


@dataclass
class RenderContext:
    """State of one file's render pass.

    Attributes:
        path (str): The file path as given, or ``-`` for standard input.
        config (Config): Effective configuration for the invocation.
        sink (TextIO): Output stream; receives each unit as soon as it is final.
        highlighter (LineHighlighter | None): Capability used when syntax
            highlighting is enabled; None renders without colors.
        stdin (TextIO | None): Stream read for ``-`` (defaults to ``sys.stdin``).
        steps (list[Step]): Steps executed so far for this context.
        read_status (ReadStatus): Outcome of loading the contents.
        render_status (RenderStatus): Outcome of rendering the contents.
        flow (FlowControl): Halt request, if any.
        content (str | None): The loaded text buffer.
        units_written (int): Render units written to the sink.
        lines_numbered (int): Non-blank units counted by the line numberer.
        diagnostics (DiagnosticLog): Info/warning/error messages for this file.
    """

    path: str
    config: Config
    sink: TextIO
    highlighter: LineHighlighter | None = None
    stdin: TextIO | None = None
    steps: list[Step] = field(default_factory=lambda: [])

    read_status: ReadStatus = ReadStatus.PENDING
    render_status: RenderStatus = RenderStatus.PENDING
    flow: FlowControl = field(default_factory=FlowControl)

    content: str | None = None
    units_written: int = 0
    lines_numbered: int = 0

    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    @classmethod
    def bootstrap(
        cls,
        *,
        path: str,
        config: Config,
        sink: TextIO,
        highlighter: LineHighlighter | None = None,
        stdin: TextIO | None = None,
    ) -> RenderContext:
        """Create a fresh context with no derived state."""
        return cls(path=path, config=config, sink=sink, highlighter=highlighter, stdin=stdin)

    # --- Convenience helpers -------------------------------------------------
    def add_info(self, message: str) -> None:
        """Add an ``info`` diagnostic to the render context."""
        self.diagnostics.info(message)

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic to the render context."""
        self.diagnostics.warning(message)

    def add_error(self, message: str) -> None:
        """Add an ``error`` diagnostic to the render context."""
        self.diagnostics.error(message)

    def stop_flow(self, reason: str, at_step: Step) -> None:
        """Request a graceful, terminal stop for the rest of the pipeline.

        Args:
            reason (str): Short machine-friendly reason code for halting the flow.
            at_step (Step): Step instance requesting the halt.
        """
        logger.info("Flow halted in %s: %s", at_step.name, reason)
        self.flow = FlowControl(halt=True, reason=reason, at_step=at_step.name)

    @property
    def exit_code(self) -> ExitCode | None:
        """Return the exit code this file's outcome maps to, or None on success."""
        return _READ_STATUS_EXIT_CODES.get(self.read_status)

    def format_summary(self, *, show_diagnostics: bool = False) -> str:
        """Return a concise one-line summary for this file.

        Examples (colors omitted here):
            src/app.py: ok - rendered
            missing.txt: not found - skipped - 1 error

        Args:
            show_diagnostics (bool): Append one indented line per diagnostic.

        Returns:
            str: Human-readable summary.
        """
        parts: list[str] = [
            f"{self.path}:",
            self.read_status.colored(),
            "-",
            self.render_status.colored(),
        ]

        if self.diagnostics:
            stats: DiagnosticStats = compute_diagnostic_stats(list(self.diagnostics))
            triage: list[str] = []
            if stats.n_error:
                n_err: int = stats.n_error
                triage.append(chalk.red_bright(f"{n_err} error" + ("s" if n_err != 1 else "")))
            if stats.n_warning:
                n_warn: int = stats.n_warning
                triage.append(chalk.yellow(f"{n_warn} warning" + ("s" if n_warn != 1 else "")))
            if triage:
                parts.append("-")
                parts.append(", ".join(triage))

        result: str = " ".join(parts)

        if show_diagnostics and self.diagnostics:
            details: list[str] = []
            for d in self.diagnostics:
                prefix: str = {
                    DiagnosticLevel.ERROR: chalk.red_bright("error"),
                    DiagnosticLevel.WARNING: chalk.yellow("warning"),
                    DiagnosticLevel.INFO: chalk.blue("info"),
                }[d.level]
                details.append(f"  [{prefix}] {d.message}")
            result += "\n" + "\n".join(details)

        return result
