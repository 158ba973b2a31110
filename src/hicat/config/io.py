# topmark:header:start
#
#   project      : HiCat
#   file         : io.py
#   file_relpath : src/hicat/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O and typed getters for HiCat configuration.

Parsing is done with `tomlkit`; documents are unwrapped into plain ``dict``
structures so the config model never handles tomlkit container types.

Schema (``hicat.toml``, or ``[tool.hicat]`` in ``pyproject.toml``):

```toml
root = false

[render]
number_lines = false
squeeze_blank = false
show_non_printing = false
syntax_highlight = false

[highlight]
language = "python"
theme = "monokai"
background = false
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from hicat.config.logging import get_logger
from hicat.constants import DEFAULT_THEME

if TYPE_CHECKING:
    from pathlib import Path

    from hicat.config.logging import HicatLogger

logger: HicatLogger = get_logger(__name__)

TomlTable = Dict[str, Any]

# Section and key names
SECTION_RENDER: str = "render"
SECTION_HIGHLIGHT: str = "highlight"
KEY_ROOT: str = "root"

RENDER_KEYS: tuple[str, ...] = (
    "number_lines",
    "squeeze_blank",
    "show_non_printing",
    "syntax_highlight",
)
HIGHLIGHT_KEYS: tuple[str, ...] = ("language", "theme", "background")


class ConfigValueError(ValueError):
    """Raised when a TOML config cannot be parsed or has a wrongly typed value."""


def load_defaults_dict() -> TomlTable:
    """Return HiCat's runtime defaults as a TOML-table-compatible dict (no I/O)."""
    return {
        SECTION_RENDER: {key: False for key in RENDER_KEYS},
        SECTION_HIGHLIGHT: {
            "theme": DEFAULT_THEME,
            "background": False,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file into a plain dict.

    Args:
        path (Path): TOML file to read.

    Returns:
        TomlTable: The parsed document.

    Raises:
        ConfigValueError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigValueError(f"Cannot read config file {path}: {e}") from e
    try:
        doc = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise ConfigValueError(f"Invalid TOML in {path}: {e}") from e
    logger.trace("loaded TOML from %s", path)
    return doc.unwrap()


def to_toml(data: TomlTable) -> str:
    """Render a dict as TOML text, dropping ``None`` values."""

    def _clean(table: TomlTable) -> TomlTable:
        out: TomlTable = {}
        for key, value in table.items():
            if value is None:
                continue
            out[key] = _clean(value) if isinstance(value, dict) else value
        return out

    return tomlkit.dumps(_clean(data))


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` (empty when absent).

    Raises:
        ConfigValueError: If ``key`` exists but is not a table.
    """
    value: Any = table.get(key, {})
    if not isinstance(value, dict):
        raise ConfigValueError(f"[{key}] must be a table, got {type(value).__name__}")
    return value


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Return a boolean value, or None when absent.

    Raises:
        ConfigValueError: If the value is present but not a boolean.
    """
    if key not in table:
        return None
    value: Any = table[key]
    if not isinstance(value, bool):
        raise ConfigValueError(f"'{key}' must be a boolean, got {value!r}")
    return value


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Return a non-empty string value, or None when absent/empty.

    Raises:
        ConfigValueError: If the value is present but not a string.
    """
    if key not in table:
        return None
    value: Any = table[key]
    if not isinstance(value, str):
        raise ConfigValueError(f"'{key}' must be a string, got {value!r}")
    return value.strip() or None


def unknown_keys(table: TomlTable, known: tuple[str, ...]) -> list[str]:
    """Return keys of ``table`` that are not in ``known``, sorted."""
    return sorted(k for k in table if k not in known)
