# Argstyle CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Terminal text styling with ANSI escape sequences.

`TextStyle` is a chainable builder over a single piece of text. Styling is
enabled only when the argument store has a `color` flag; the check happens
once, when the builder is created. With styling disabled the rendered text is
only padded.

Example:
    title = TextStyle("Summary").bold().color_foreground(Color.CYAN).pad(20)
    print(title)

Rendered layout (styling enabled):
    ESC[<decoration><fg intensity><fg color>m ESC[<bg intensity><bg color>m text ESC[0m
"""
from __future__ import annotations

from copy import copy
from dataclasses import dataclass, replace
from enum import Enum

from argstyle.colors import (
    BEGIN,
    DEACTIVATE,
    DECORATION_BOLD,
    DECORATION_NONE,
    DECORATION_UNDERLINE,
    END,
    HIGH_BACKGROUND,
    HIGH_FOREGROUND,
    REGULAR_BACKGROUND,
    REGULAR_FOREGROUND,
    Color,
)
from argstyle.store import ArgumentStore, get_argument_store

COLOR_FLAG = "color"


class PadDirection(Enum):
    """Side(s) of the text that receive padding."""

    RIGHT = "right"
    LEFT = "left"
    BOTH = "both"


class StyleTarget(Enum):
    """Which layer of the text a color or highlight applies to."""

    BACKGROUND = "background"
    FOREGROUND = "foreground"

    @classmethod
    def resolve(cls, target: StyleTarget | str) -> StyleTarget:
        """Resolve a target; anything that is not a background spelling is foreground."""
        if isinstance(target, cls):
            return target
        if str(target).lower() in ("background", "bg"):
            return cls.BACKGROUND
        return cls.FOREGROUND


@dataclass
class StyleState:
    """Options accumulated by a `TextStyle`."""

    text: str = ""
    foreground: str = Color.WHITE.value
    background: str = Color.BLACK.value
    bold: bool = False
    underline: bool = False
    highlight_background: bool = False
    highlight_foreground: bool = False
    pad_width: int = 0
    pad_char: str = " "
    pad_direction: PadDirection = PadDirection.RIGHT


def pad_text(
    text: str,
    width: int,
    pad_char: str = " ",
    direction: PadDirection = PadDirection.RIGHT,
) -> str:
    """
    Pad `text` to `width` characters.

    Multi-character pad strings are repeated and truncated. Text already as
    long as `width` is returned unchanged. With `PadDirection.BOTH` the left
    side gets the smaller half.
    """
    missing = width - len(text)
    if missing <= 0:
        return text
    pad_char = pad_char or " "

    def fill(size: int) -> str:
        return (pad_char * (size // len(pad_char) + 1))[:size]

    if direction is PadDirection.LEFT:
        return fill(missing) + text
    if direction is PadDirection.BOTH:
        left = missing // 2
        return fill(left) + text + fill(missing - left)
    return text + fill(missing)


def _color_code(color: Color | str) -> str:
    if isinstance(color, Color):
        return color.value
    return str(color)


class TextStyle:
    """
    Builds a styled string for terminal display.

    Args:
        text (str): The text to style.
        store (ArgumentStore | None): Store consulted for the `color` flag.
            The shared store is used when omitted.
        enabled (bool | None): Force styling on or off instead of consulting
            the store.
    """

    def __init__(
        self,
        text: str = "",
        store: ArgumentStore | None = None,
        enabled: bool | None = None,
    ) -> None:
        self.state = StyleState(text=str(text))
        if enabled is None:
            enabled = (store or get_argument_store()).has(COLOR_FLAG)
        self.is_style_enabled: bool = enabled

    def underline(self, enabled: bool = True) -> TextStyle:
        self.state.underline = bool(enabled)
        return self

    def bold(self, enabled: bool = True) -> TextStyle:
        self.state.bold = bool(enabled)
        return self

    def highlight(
        self, target: StyleTarget | str = StyleTarget.BACKGROUND, enabled: bool = True
    ) -> TextStyle:
        """Enable or disable the high intensity range on the background or foreground."""
        if StyleTarget.resolve(target) is StyleTarget.BACKGROUND:
            return self.highlight_background(enabled)
        return self.highlight_foreground(enabled)

    def highlight_background(self, enabled: bool = True) -> TextStyle:
        self.state.highlight_background = bool(enabled)
        return self

    def highlight_foreground(self, enabled: bool = True) -> TextStyle:
        self.state.highlight_foreground = bool(enabled)
        return self

    def color(
        self,
        target: StyleTarget | str = StyleTarget.BACKGROUND,
        color: Color | str = Color.WHITE,
    ) -> TextStyle:
        """Set the background or foreground color."""
        if StyleTarget.resolve(target) is StyleTarget.BACKGROUND:
            return self.color_background(color)
        return self.color_foreground(color)

    def color_background(self, color: Color | str = Color.WHITE) -> TextStyle:
        self.state.background = _color_code(color)
        return self

    def color_foreground(self, color: Color | str = Color.WHITE) -> TextStyle:
        self.state.foreground = _color_code(color)
        return self

    def pad(
        self,
        width: int,
        pad_char: str = " ",
        direction: PadDirection = PadDirection.RIGHT,
    ) -> TextStyle:
        """Pad the text to `width` characters when rendered."""
        self.state.pad_width = width
        self.state.pad_char = pad_char
        self.state.pad_direction = direction
        return self

    def set_text(self, text: str = "") -> TextStyle:
        self.state.text = str(text)
        return self

    def reset(self) -> TextStyle:
        """Restore every option except the text to its default."""
        self.state = StyleState(text=self.state.text)
        return self

    def copy(self) -> TextStyle:
        """Return an independent builder with the same options."""
        clone = copy(self)
        clone.state = replace(self.state)
        return clone

    def _padded_text(self) -> str:
        state = self.state
        if state.pad_width > 0:
            return pad_text(state.text, state.pad_width, state.pad_char, state.pad_direction)
        return state.text

    def get(self) -> str:
        """Render the text with its styles."""
        state = self.state
        text_display = self._padded_text()

        if not self.is_style_enabled:
            return text_display

        text = ""
        if state.foreground != "":
            highlight = HIGH_FOREGROUND if state.highlight_foreground else REGULAR_FOREGROUND
            decoration = DECORATION_BOLD if state.bold else ""
            decoration += DECORATION_UNDERLINE if state.underline else ""
            decoration = decoration or DECORATION_NONE
            text += f"{BEGIN}{decoration}{highlight}{state.foreground}{END}"

        if state.background != "":
            highlight = HIGH_BACKGROUND if state.highlight_background else REGULAR_BACKGROUND
            text += f"{BEGIN}{highlight}{state.background}{END}"

        return f"{text}{text_display}{DEACTIVATE}"

    def __str__(self) -> str:
        return self.get()

    def __len__(self) -> int:
        return len(self._padded_text())

    def __repr__(self) -> str:
        return f"TextStyle(state={self.state!r}, enabled={self.is_style_enabled})"
