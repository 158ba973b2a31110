# topmark:header:start
#
#   project      : HiCat
#   file         : escaper.py
#   file_relpath : src/hicat/pipeline/escaper.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render a fixed set of non-printing control characters as visible mnemonics."""

from __future__ import annotations

from typing import Final

# Control character -> two-character mnemonic
NON_PRINTING_MNEMONICS: Final[dict[str, str]] = {
    "\x0b": "^K",
    "\x0c": "^L",
    "\x0e": "^N",
    "\x0f": "^O",
    "\x1b": "^E",
    "\x7f": "^?",
}

_TRANSLATION: Final[dict[int, str]] = str.maketrans(NON_PRINTING_MNEMONICS)


def has_non_printing(text: str) -> bool:
    """Return True if ``text`` contains any character that would be escaped."""
    return any(ch in NON_PRINTING_MNEMONICS for ch in text)


def escape_non_printing(text: str, enabled: bool) -> str:
    """Replace the control characters in `NON_PRINTING_MNEMONICS` when ``enabled``.

    Every other character, including line terminators, passes through unchanged.

    Args:
        text (str): Fragment text.
        enabled (bool): When False, ``text`` is returned as-is.

    Returns:
        str: The (possibly) escaped text.
    """
    if not enabled or not has_non_printing(text):
        return text
    return text.translate(_TRANSLATION)
