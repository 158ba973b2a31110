# topmark:header:start
#
#   project      : HiCat
#   file         : test_dump_config.py
#   file_relpath : tests/cli/test_dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for ``--dump-config``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit

from hicat.cli.main import CONFIG_DUMP_BEGIN, CONFIG_DUMP_END
from hicat.constants import DEFAULT_THEME
from tests.cli.conftest import assert_SUCCESS, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


def _dumped(result: Result) -> dict[str, Any]:
    lines: list[str] = result.stdout.splitlines()
    start: int = lines.index(CONFIG_DUMP_BEGIN)
    end: int = lines.index(CONFIG_DUMP_END)
    return tomlkit.parse("\n".join(lines[start + 1 : end])).unwrap()


def test_dump_defaults(isolation: Path) -> None:
    result: Result = run_cli_in(isolation, ["--dump-config"])
    assert_SUCCESS(result)
    data: dict[str, Any] = _dumped(result)
    assert data["render"] == {
        "number_lines": False,
        "squeeze_blank": False,
        "show_non_printing": False,
        "syntax_highlight": False,
    }
    assert data["highlight"] == {"theme": DEFAULT_THEME, "background": False}


def test_dump_reflects_config_files_and_flags(isolation: Path) -> None:
    (isolation / "hicat.toml").write_text(
        "root = true\n[render]\nsqueeze_blank = true\n[highlight]\nlanguage = 'rust'\n",
        encoding="utf-8",
    )
    result: Result = run_cli_in(isolation, ["--dump-config", "-b", "-t", "vim"])
    assert_SUCCESS(result)
    data: dict[str, Any] = _dumped(result)
    assert data["render"]["number_lines"] is True
    assert data["render"]["squeeze_blank"] is True
    assert data["highlight"] == {"language": "rust", "theme": "vim", "background": False}


def test_dump_ignores_files(isolation: Path) -> None:
    (isolation / "a.txt").write_text("content\n", encoding="utf-8")
    result: Result = run_cli_in(isolation, ["--dump-config", "a.txt", "missing.txt"])
    assert_SUCCESS(result)
    assert "content" not in result.stdout
    assert "--dump-config ignores FILES" in result.stderr
