# topmark:header:start
#
#   project      : HiCat
#   file         : source.py
#   file_relpath : src/hicat/pipeline/source.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Content source: load a file's entire contents as one text buffer.

Files are decoded as strict UTF-8 with ``newline=""`` so that ``\r\n`` and lone
``\r`` survive untouched; the renderer must be able to reproduce the input
byte-for-byte when no transform is enabled.

The path ``-`` designates standard input, which is read fully before
rendering starts.
"""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from hicat.config.logging import get_logger
from hicat.constants import STDIN_PATH

if TYPE_CHECKING:
    from hicat.config.logging import HicatLogger

logger: HicatLogger = get_logger(__name__)

__all__: list[str] = [
    "ReadError",
    "ReadFailure",
    "is_stdin_path",
    "read_contents",
]


class ReadFailure(Enum):
    """Why a content read failed."""

    NOT_FOUND = "not found"
    IS_DIRECTORY = "is a directory"
    PERMISSION_DENIED = "permission denied"
    NOT_TEXT = "not valid UTF-8 text"
    IO_ERROR = "I/O error"


class ReadError(Exception):
    """Raised when a file's contents cannot be loaded as text.

    The original exception is available as ``__cause__``.

    Attributes:
        path (str): The path as given by the caller.
        reason (ReadFailure): Classified failure reason.
        detail (str): The underlying error message.
    """

    def __init__(self, path: Path | str, reason: ReadFailure, detail: str = "") -> None:
        self.path = str(path)
        self.reason = reason
        self.detail = detail
        message: str = f"{self.path}: {reason.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


def is_stdin_path(path: Path | str) -> bool:
    """Return True if ``path`` designates standard input."""
    return str(path) == STDIN_PATH


def _read_stream(stream: TextIO, name: str) -> str:
    try:
        return stream.read()
    except UnicodeDecodeError as e:
        raise ReadError(name, ReadFailure.NOT_TEXT, str(e)) from e
    except OSError as e:
        raise ReadError(name, ReadFailure.IO_ERROR, str(e)) from e


def read_contents(path: Path | str, *, stdin: TextIO | None = None) -> str:
    """Return the full contents of ``path`` as text.

    Args:
        path (Path | str): File to read, or ``-`` for standard input.
        stdin (TextIO | None): Stream used for ``-`` (defaults to ``sys.stdin``).

    Returns:
        str: The decoded contents, line terminators preserved.

    Raises:
        ReadError: If the file is missing, a directory, unreadable, or not
            valid UTF-8 text.
    """
    if is_stdin_path(path):
        logger.debug("reading content from standard input")
        return _read_stream(stdin or sys.stdin, STDIN_PATH)

    p = Path(path)
    try:
        with p.open("r", encoding="utf-8", errors="strict", newline="") as fh:
            contents: str = fh.read()
    except FileNotFoundError as e:
        raise ReadError(path, ReadFailure.NOT_FOUND, e.strerror or "") from e
    except IsADirectoryError as e:
        raise ReadError(path, ReadFailure.IS_DIRECTORY, e.strerror or "") from e
    except PermissionError as e:
        raise ReadError(path, ReadFailure.PERMISSION_DENIED, e.strerror or "") from e
    except UnicodeDecodeError as e:
        raise ReadError(path, ReadFailure.NOT_TEXT, str(e)) from e
    except OSError as e:
        raise ReadError(path, ReadFailure.IO_ERROR, e.strerror or str(e)) from e

    logger.trace("read %d character(s) from %s", len(contents), p)
    return contents
