# topmark:header:start
#
#   project      : HiCat
#   file         : numberer.py
#   file_relpath : src/hicat/pipeline/numberer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line numbering for non-blank units."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class LineNumberer:
    """Per-pass line counter and prefixer.

    The counter advances once for every non-blank unit that reaches the write
    stage, whether or not the number is shown. Blank units must not be passed
    to `apply`. Create one instance per file so numbering restarts at 1.

    Attributes:
        enabled (bool): Whether ``apply`` prefixes the number.
        next_number (int): Number given to the next non-blank unit.
    """

    enabled: bool = False
    next_number: int = 1

    def apply(self, text: str) -> str:
        """Return ``text`` prefixed with ``"<n> "`` when enabled, and advance.

        Args:
            text (str): Already escaped and highlighted unit text.

        Returns:
            str: The prefixed (or unchanged) text.
        """
        number: int = self.next_number
        self.next_number += 1
        if not self.enabled:
            return text
        return f"{number} {text}"

    @property
    def lines_numbered(self) -> int:
        """Count of non-blank units seen so far."""
        return self.next_number - 1
