# topmark:header:start
#
#   project      : HiCat
#   file         : constants.py
#   file_relpath : src/hicat/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HiCat Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    HICAT_VERSION: str = get_version("hicat")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    HICAT_VERSION = "0.0.0"

# Config file names recognized during discovery:
HICAT_TOML_NAME: str = "hicat.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Environment variable honored by `hicat.config.logging.resolve_env_log_level`:
LOG_LEVEL_ENV_VAR: str = "HICAT_LOG_LEVEL"

# Theme used when none is configured or the configured one is unknown:
DEFAULT_THEME: str = "monokai"

# Path that designates standard input on the command line:
STDIN_PATH: str = "-"
