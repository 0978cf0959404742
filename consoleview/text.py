"""Styled text primitives: colours, modifiers, styles, spans and lines."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field, replace
from enum import Enum, Flag, auto
from typing import Union


class Color(Enum):
    """The named terminal colours."""

    RESET = "reset"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    GRAY = "gray"
    DARK_GRAY = "dark_gray"
    LIGHT_RED = "light_red"
    LIGHT_GREEN = "light_green"
    LIGHT_YELLOW = "light_yellow"
    LIGHT_BLUE = "light_blue"
    LIGHT_MAGENTA = "light_magenta"
    LIGHT_CYAN = "light_cyan"
    WHITE = "white"


@dataclass(frozen=True)
class IndexedColor:
    """A colour from the ANSI 256-colour palette."""

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index <= 255:
            raise ValueError(f"colour index out of range: {self.index}")


@dataclass(frozen=True)
class RgbColor:
    """A true (24-bit) colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")


AnyColor = Union[Color, IndexedColor, RgbColor]


class Modifier(Flag):
    """Text attributes that can be switched on or off."""

    BOLD = auto()
    DIM = auto()
    ITALIC = auto()
    UNDERLINED = auto()
    SLOW_BLINK = auto()
    RAPID_BLINK = auto()
    REVERSED = auto()
    HIDDEN = auto()
    CROSSED_OUT = auto()


_NO_MODIFIERS = Modifier(0)


@dataclass(frozen=True)
class Style:
    """An immutable text style: a foreground colour and modifier changes."""

    foreground: AnyColor | None = None
    added: Modifier = _NO_MODIFIERS
    removed: Modifier = _NO_MODIFIERS

    def fg(self, color: AnyColor) -> Style:
        """Return a copy of this style with the given foreground colour."""
        return replace(self, foreground=color)

    def add_modifier(self, modifier: Modifier) -> Style:
        """Return a copy of this style that switches ``modifier`` on."""
        return replace(self, added=self.added | modifier, removed=self.removed & ~modifier)

    def remove_modifier(self, modifier: Modifier) -> Style:
        """Return a copy of this style that switches ``modifier`` off."""
        return replace(self, added=self.added & ~modifier, removed=self.removed | modifier)


def _char_width(char: str) -> int:
    if unicodedata.combining(char) or unicodedata.category(char) in ("Mn", "Me", "Cf"):
        return 0
    if unicodedata.east_asian_width(char) in ("W", "F"):
        return 2
    return 1


@dataclass(frozen=True)
class Span:
    """A piece of text with a single style."""

    content: str
    style: Style = Style()

    @classmethod
    def raw(cls, text: str) -> Span:
        """A span with the default style."""
        return cls(text)

    @classmethod
    def styled(cls, text: str, style: Style) -> Span:
        """A span with the given style."""
        return cls(text, style)

    def width(self) -> int:
        """The number of terminal columns the content occupies."""
        return sum(_char_width(char) for char in self.content)


@dataclass
class Line:
    """A sequence of spans displayed on one line."""

    spans: list[Span] = field(default_factory=list)

    def width(self) -> int:
        """The number of terminal columns the whole line occupies."""
        return sum(span.width() for span in self.spans)

    def plain(self) -> str:
        """The line's text without any styling."""
        return "".join(span.content for span in self.spans)


def bold(text: str) -> Span:
    """A span displaying ``text`` in bold."""
    return Span.styled(text, Style().add_modifier(Modifier.BOLD))