# topmark:header:start
#
#   project      : HiCat
#   file         : colored_enum.py
#   file_relpath : src/hicat/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware string enum used for human-facing status output.

A `ColoredStrEnum` member is declared as ``(text, colorizer)``. Its ``.value``
stays the plain text, so equality, hashing and ``repr`` behave like any
``str`` enum, while ``.color`` exposes the colorizer (typically a yachalk
``ChalkBuilder``) for rendering the member in a terminal.

Example:
    ```python
    from yachalk import chalk

    class Health(ColoredStrEnum):
        OK = ("ok", chalk.green)
        BAD = ("bad", chalk.red_bright)

    Health.OK.value              # 'ok'
    Health.BAD.color("oops")     # red "oops"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable compatible with `yachalk.ChalkBuilder.__call__`."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Join ``args`` with ``sep`` and decorate the result for display."""
        ...


class ColoredStrEnum(str, Enum):
    """``str`` enum whose members carry a colorizer next to their text value."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a member whose value is ``text`` and whose colorizer is ``color``."""
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with the member."""
        return self._color

    def colored(self) -> str:
        """Return the member's text decorated with its own colorizer."""
        return self._color(self._value_)
