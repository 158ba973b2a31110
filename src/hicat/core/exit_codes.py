# topmark:header:start
#
#   project      : HiCat
#   file         : exit_codes.py
#   file_relpath : src/hicat/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for HiCat.

HiCat aligns with the BSD `sysexits` convention so that other tooling can
interpret failures consistently. When several files fail, the process exits
with the code of the *first* failure; later files are still rendered.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the HiCat CLI.

    Attributes:
        SUCCESS: Every file was rendered.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: A file could not be decoded as UTF-8 text.
            Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist or is a directory.
            Mirrors BSD ``EX_NOINPUT (66)``.
        PIPELINE_ERROR: Internal render pipeline failure. Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading input or writing output. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Missing/invalid/malformed config. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    PIPELINE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG
