# topmark:header:start
#
#   project      : HiCat
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running HiCat in a controlled working directory.

`run_cli_in()` changes the process working directory to the given directory
before invoking the Click CLI, so relative file arguments and config
discovery are resolved against the temporary test directory.

Rendered content goes to ``result.stdout``; warnings, errors and summaries
go to ``result.stderr``.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from hicat.cli.main import cli
from hicat.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["-b", "a.txt"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this for invocations that do not touch the file system
    (``--help``, ``--version``, listings, standard input).
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_FILE_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with FILE_NOT_FOUND (code 66)."""
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


def assert_ENCODING_ERROR(result: Result) -> None:
    """Assert that the command exited with ENCODING_ERROR (code 65)."""
    assert result.exit_code == ExitCode.ENCODING_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
