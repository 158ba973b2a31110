# topmark:header:start
#
#   project      : HiCat
#   file         : __init__.py
#   file_relpath : src/hicat/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for HiCat.

Layered TOML configuration (defaults, user file, project files, ``--config``
files, CLI overrides) parsed with tomlkit. `Config` is the frozen snapshot
used at runtime; `MutableConfig` builds and merges it.
"""

from __future__ import annotations

from hicat.config.io import ConfigValueError
from hicat.config.model import ArgsLike, Config, MutableConfig

__all__: list[str] = [
    "ArgsLike",
    "Config",
    "ConfigValueError",
    "MutableConfig",
]
