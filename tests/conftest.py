# topmark:header:start
#
#   project      : HiCat
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the HiCat test suite.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `make_config` (a `MutableConfig` frozen into a `Config`) and
    never mutate a frozen `Config`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from hicat.config import MutableConfig, logging

if TYPE_CHECKING:
    from pathlib import Path

    from hicat.config import Config

F = TypeVar("F", bound=Callable[..., object])

# Decorator that takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_hicat_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure HiCat's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    HICAT_LOG_LEVEL in their shell.
    """
    monkeypatch.delenv("HICAT_LOG_LEVEL", raising=False)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test from an isolated project directory without user config.

    ``XDG_CONFIG_HOME`` points into ``tmp_path`` and the project directory
    declares ``root = true`` so no config above ``tmp_path`` is discovered.

    Returns:
        Path: The working directory for the test.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "hicat.toml").write_text("root = true\n", encoding="utf-8")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.chdir(cwd)
    return cwd


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level during tests so every code path formats its records."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Field overrides applied to the mutable builder.

    Returns:
        Config: An immutable configuration snapshot for use in tests.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()
