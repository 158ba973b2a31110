# topmark:header:start
#
#   project      : HiCat
#   file         : test_console.py
#   file_relpath : tests/cli/test_console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the program-output console."""

from __future__ import annotations

import io

from hicat.cli.console import ClickConsole


def _console(*, enable_color: bool) -> tuple[ClickConsole, io.StringIO, io.StringIO]:
    out, err = io.StringIO(), io.StringIO()
    return ClickConsole(enable_color=enable_color, out=out, err=err), out, err


def test_messages_are_routed_by_kind() -> None:
    console, out, err = _console(enable_color=False)
    console.print("listing")
    console.status("a.txt: ok - rendered")
    console.warn("careful")
    console.error("broken")
    assert out.getvalue() == "listing\n"
    assert err.getvalue() == "a.txt: ok - rendered\ncareful\nbroken\n"


def test_print_without_newline() -> None:
    console, out, _ = _console(enable_color=False)
    console.print("a = 1\n", nl=False)
    assert out.getvalue() == "a = 1\n"


def test_colors_kept_only_when_enabled() -> None:
    console, _, err = _console(enable_color=True)
    console.error("broken")
    assert "\x1b[" in err.getvalue()

    plain, _, plain_err = _console(enable_color=False)
    plain.error("broken")
    assert plain_err.getvalue() == "broken\n"
