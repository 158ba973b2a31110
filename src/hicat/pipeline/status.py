# topmark:header:start
#
#   project      : HiCat
#   file         : status.py
#   file_relpath : src/hicat/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status enums for the two axes of a file's render pass.

``ReadStatus`` is owned by the reader step and ``RenderStatus`` by the render
step. Values are human-readable strings shown in verbose summaries; compare
with ``==`` rather than identity.
"""

from __future__ import annotations

from yachalk import chalk

from hicat.rendering.colored_enum import ColoredStrEnum


class ReadStatus(ColoredStrEnum):
    """Outcome of loading a file's contents."""

    PENDING = ("read pending", chalk.gray)
    OK = ("ok", chalk.green)
    EMPTY = ("empty file", chalk.yellow)
    NOT_FOUND = ("not found", chalk.red)
    IS_DIRECTORY = ("is a directory", chalk.red)
    NO_READ_PERMISSION = ("no read permission", chalk.red_bright)
    UNICODE_DECODE_ERROR = ("not valid UTF-8 text", chalk.red_bright)
    UNREADABLE = ("read error", chalk.red_bright)


class RenderStatus(ColoredStrEnum):
    """Outcome of rendering a loaded buffer to the sink."""

    PENDING = ("render pending", chalk.gray)
    RENDERED = ("rendered", chalk.green)
    DEGRADED = ("rendered without highlighting", chalk.yellow)
    SKIPPED = ("skipped", chalk.yellow)
