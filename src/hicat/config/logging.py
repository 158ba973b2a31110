# topmark:header:start
#
#   project      : HiCat
#   file         : logging.py
#   file_relpath : src/hicat/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HiCat logging with a TRACE level and chalk-colored records.

Log records are always written to **stderr**: stdout is reserved for the
rendered file contents, and mixing the two would corrupt piped output.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from hicat.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class HicatLogger(logging.Logger):
    """Logger class with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg`` using %-formatting.
            extra (Mapping[str, object] | None): Optional extra record attributes.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(HicatLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter that colors whole records according to their severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim.red(message)


_NAME_TO_LEVEL: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level() -> int | None:
    """Return a logging level from the environment, or None if unset/invalid.

    Honors ``HICAT_LOG_LEVEL`` (e.g. "TRACE", "DEBUG", "INFO", or numeric "10").
    """
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    return _NAME_TO_LEVEL.get(v)


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a level and a colored stderr handler.

    If ``level`` is None, the environment is consulted via
    `resolve_env_log_level`. Default is CRITICAL, which keeps the tool silent.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Replace handlers so repeated setup (tests, re-entrant CLI) does not duplicate output
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> HicatLogger:
    """Retrieve a HicatLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        HicatLogger: A HicatLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("HicatLogger", logger)
