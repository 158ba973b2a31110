# topmark:header:start
#
#   project      : HiCat
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HiCat project automation via Nox.

Sessions:
  - `lint`: Ruff lint.
  - `lint_fixall`: Ruff lint autofix.
  - `format_check`: Verify formatting (ruff).
  - `format`: Apply formatting (ruff).
  - `qa`: Per-Python session that runs pytest and pyright.
  - `property_test`: Hypothesis property tests with more examples (opt-in).

Common invocations:
  - `nox -s lint`
  - `nox -s format_check`
  - `nox -s qa` (runs for all configured Python versions)
"""

from __future__ import annotations

import pathlib
import sys
import warnings
from typing import TYPE_CHECKING, Any, cast

import nox

if TYPE_CHECKING:
    from collections.abc import Callable

if sys.version_info >= (3, 11):
    import tomllib

    _toml_loads = cast("Callable[[str], dict[str, Any]]", tomllib.loads)  # type: ignore[assignment]
else:
    import toml

    _toml_loads = cast("Callable[[str], dict[str, Any]]", toml.loads)  # type: ignore[assignment]

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"


def _parse_pyproject_toml() -> dict[str, Any]:
    """Parse `pyproject.toml` (runs at noxfile import time, stdlib/toml only)."""
    path: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
    if not path.exists():
        return {}
    return _toml_loads(path.read_text(encoding="utf-8"))


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers.

    Returns:
        list[str]: Supported versions like ["3.10", "3.11", ...], sorted.
    """
    project: Any = _parse_pyproject_toml().get("project")
    classifiers: Any = project.get("classifiers") if isinstance(project, dict) else None
    if not isinstance(classifiers, list):
        warnings.warn(
            f"No classifiers in pyproject.toml. Falling back to Python {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]

    prefix = "Programming Language :: Python :: "
    versions: set[str] = set()
    for c in cast("list[str]", classifiers):
        if not c.startswith(prefix):
            continue
        parts: list[str] = c.removeprefix(prefix).strip().split(".")
        if len(parts) == 2 and all(p.isdigit() for p in parts):
            versions.add(f"{int(parts[0])}.{int(parts[1])}")

    def _key(s: str) -> tuple[int, int]:
        major_s, minor_s = s.split(".")
        return int(major_s), int(minor_s)

    return sorted(versions, key=_key) or [CURRENT_PYTHON_VERSION]


PYTHONS: list[str] = get_supported_pythons()

nox.options.sessions = ["lint", "format_check"]


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run tests + pyright (per Python version)."""
    session.log("Supported Python versions: " + ", ".join(PYTHONS))

    session.install("-e", ".[test,dev]")

    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)

    py_ver = session.python
    if not isinstance(py_ver, str) or not py_ver:
        raise RuntimeError(f"Unexpected session.python value: {py_ver!r}")

    session.run("pyright", "--pythonversion", py_ver)


@nox.session
def lint(session: nox.Session) -> None:
    """Static analysis."""
    session.install("-e", ".[dev]")
    session.run("ruff", "check", ".")


@nox.session
def lint_fixall(session: nox.Session) -> None:
    """Run ruff with --fix (auto-fix lint issues)."""
    session.install("-e", ".[dev]")
    session.run("ruff", "check", "--fix", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Check code formatting."""
    session.install("-e", ".[dev]")
    session.run("ruff", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:
    """Format code (auto-fix)."""
    session.install("-e", ".[dev]")
    session.run("ruff", "format", ".")


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the slow property tests (developer only)."""
    session.install("-e", ".[test]")
    session.run("pytest", "-vv", "tests", "-m", "hypothesis_slow", *session.posargs)
