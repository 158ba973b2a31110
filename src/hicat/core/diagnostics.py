# topmark:header:start
#
#   project      : HiCat
#   file         : diagnostics.py
#   file_relpath : src/hicat/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics collected while loading config or rendering a file."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import cast

from yachalk import chalk


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function for this severity level.

        Returns:
            Callable[[str], str]: The color function for human-readable output.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str

    def render(self) -> str:
        """Return ``"<level>: <message>"`` colored by severity."""
        return self.level.color(f"{self.level.value}: {self.message}")


@dataclass
class DiagnosticLog:
    """Append-only collection of diagnostics with level helpers."""

    items: list[Diagnostic] = field(default_factory=list[Diagnostic])

    def add(self, level: DiagnosticLevel, message: str) -> None:
        """Append a diagnostic."""
        self.items.append(Diagnostic(level, message))

    def info(self, message: str) -> None:
        """Append an INFO diagnostic."""
        self.add(DiagnosticLevel.INFO, message)

    def warning(self, message: str) -> None:
        """Append a WARNING diagnostic."""
        self.add(DiagnosticLevel.WARNING, message)

    def error(self, message: str) -> None:
        """Append an ERROR diagnostic."""
        self.add(DiagnosticLevel.ERROR, message)

    def extend(self, other: Sequence[Diagnostic]) -> None:
        """Append every diagnostic from ``other``."""
        self.items.extend(other)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error


def compute_diagnostic_stats(diags: Sequence[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics."""
    n_info: int = sum(1 for d in diags if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in diags if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in diags if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)
