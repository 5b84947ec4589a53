# Argstyle CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
ANSI palette and escape code fragments used by `TextStyle`.

A `Color` value is the last digit of an SGR color code. The intensity
selector in front of it picks the range: `3x`/`4x` for regular foreground and
background, `9x`/`10x` for their highlighted variants. `WHITE` uses the
terminal default slot `9`, so the default foreground renders as `39`.
"""
from enum import Enum

from argstyle.exceptions import InvalidColorError

DECORATION_NONE = "0;"
DECORATION_BOLD = "1;"
DECORATION_UNDERLINE = "4;"

REGULAR_FOREGROUND = "3"
REGULAR_BACKGROUND = "4"
HIGH_FOREGROUND = "9"
HIGH_BACKGROUND = "10"

BEGIN = "\033["
END = "m"
DEACTIVATE = "\033[0m"


class Color(str, Enum):
    """Color digits of the ANSI palette."""

    NONE = ""
    BLACK = "0"
    RED = "1"
    GREEN = "2"
    YELLOW = "3"
    BLUE = "4"
    MAGENTA = "5"
    CYAN = "6"
    GREY = "7"
    WHITE = "9"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """Look up a color by case-insensitive name."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(color.name.lower() for color in cls)
            raise InvalidColorError(
                f"Unknown color '{name}', expected one of: {choices}"
            ) from None
