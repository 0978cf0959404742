"""Palette handling, duration formatting and the shared display styles."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Union

from consoleview.text import (
    AnyColor,
    Color,
    IndexedColor,
    Line,
    Modifier,
    RgbColor,
    Span,
    Style,
)

_NANOS_PER_SEC = 1_000_000_000
_NANOS_PER_MILLI = 1_000_000
_NANOS_PER_MICRO = 1_000
_SECS_PER_MINUTE = 60
_SECS_PER_HOUR = 60 * 60
_SECS_PER_DAY = 60 * 60 * 24


class Palette(Enum):
    """Which colours the terminal is allowed to use."""

    NO_COLORS = "off"
    ANSI8 = "8"
    ANSI16 = "16"
    ANSI256 = "256"
    ALL = "all"

    @classmethod
    def parse(cls, text: str) -> Palette:
        """Parse a palette name such as ``"256"``, ``"all"`` or ``"off"``."""
        value = text.strip()
        numeric = {"0": cls.NO_COLORS, "8": cls.ANSI8, "16": cls.ANSI16, "256": cls.ANSI256}
        if value in numeric:
            return numeric[value]
        lowered = value.lower()
        if lowered == "all":
            return cls.ALL
        if lowered == "off":
            return cls.NO_COLORS
        raise ValueError("invalid color palette")


@dataclass(frozen=True)
class ColorToggles:
    """Switches for optional colouring."""

    color_durations: bool = True
    color_terminated: bool = True


class DurationKind(Enum):
    """The unit layout a formatted duration uses."""

    DAYS = auto()
    DAYS_HOURS = auto()
    HOURS_MINUTES = auto()
    MINUTES_SECONDS = auto()
    DEBUG = auto()


@dataclass(frozen=True)
class FormattedDuration:
    """Formatted duration text together with its unit layout."""

    kind: DurationKind
    text: str


TitleLike = Union[str, Span, Line, "list[Span]"]


@dataclass(frozen=True)
class Block:
    """A bordered box that can carry a title."""

    borders: bool = False
    rounded: bool = False
    title_line: Line | None = None

    def title(self, title: TitleLike) -> Block:
        """Return a copy of this block with the given title."""
        if isinstance(title, str):
            line = Line([Span.raw(title)])
        elif isinstance(title, Span):
            line = Line([title])
        elif isinstance(title, Line):
            line = Line(list(title.spans))
        else:
            line = Line(list(title))
        return replace(self, title_line=line)


_ANSI_KIND_COLORS = {
    DurationKind.DAYS: Color.BLUE,
    DurationKind.DAYS_HOURS: Color.BLUE,
    DurationKind.HOURS_MINUTES: Color.CYAN,
    DurationKind.MINUTES_SECONDS: Color.GREEN,
}
_ANSI_SUFFIX_COLORS = (
    ("ps", Color.GRAY),
    ("ns", Color.GRAY),
    ("µs", Color.MAGENTA),
    ("us", Color.MAGENTA),
    ("ms", Color.RED),
    ("s", Color.YELLOW),
)
_INDEXED_KIND_COLORS = {
    DurationKind.DAYS: IndexedColor(33),
    DurationKind.DAYS_HOURS: IndexedColor(33),
    DurationKind.HOURS_MINUTES: IndexedColor(39),
    DurationKind.MINUTES_SECONDS: IndexedColor(45),
}
_INDEXED_SUFFIX_COLORS = (
    ("ps", IndexedColor(40)),
    ("ns", IndexedColor(41)),
    ("µs", IndexedColor(42)),
    ("us", IndexedColor(42)),
    ("ms", IndexedColor(43)),
    ("s", IndexedColor(44)),
)
_ANSI8_TRANSLATIONS = {
    Color.LIGHT_RED: Color.RED,
    Color.LIGHT_GREEN: Color.GREEN,
    Color.LIGHT_YELLOW: Color.YELLOW,
    Color.LIGHT_BLUE: Color.BLUE,
    Color.LIGHT_MAGENTA: Color.MAGENTA,
}


def _decimal(integer: int, fraction: int, divisor: int, precision: int | None) -> str:
    limit = 9 if precision is None else min(precision, 9)
    digits: list[int] = []
    while fraction > 0 and len(digits) < limit:
        digits.append(fraction // divisor)
        fraction %= divisor
        divisor //= 10

    if fraction > 0 and fraction >= divisor * 5:
        carry = True
        for pos in reversed(range(len(digits))):
            if digits[pos] < 9:
                digits[pos] += 1
                carry = False
                break
            digits[pos] = 0
        if carry:
            integer += 1

    end = len(digits) if precision is None else min(precision, 9)
    if end == 0:
        return str(integer)
    shown = "".join(str(d) for d in digits[:end]).ljust(end, "0")
    target = len(digits) if precision is None else precision
    return f"{integer}.{shown.ljust(target, '0')}"


def format_debug_duration(
    nanos: int, precision: int | None = None, width: int | None = None
) -> str:
    """Format a duration in seconds, milliseconds, microseconds or nanoseconds.

    Without a precision, trailing zero digits are left out. With a width,
    the text is right-aligned to that many characters.
    """
    if nanos < 0:
        raise ValueError("duration must not be negative")
    secs, sub = divmod(nanos, _NANOS_PER_SEC)
    if secs:
        text = _decimal(secs, sub, _NANOS_PER_SEC // 10, precision) + "s"
    elif sub >= _NANOS_PER_MILLI:
        whole, frac = divmod(sub, _NANOS_PER_MILLI)
        text = _decimal(whole, frac, _NANOS_PER_MILLI // 10, precision) + "ms"
    elif sub >= _NANOS_PER_MICRO:
        whole, frac = divmod(sub, _NANOS_PER_MICRO)
        text = _decimal(whole, frac, _NANOS_PER_MICRO // 10, precision) + "µs"
    else:
        text = _decimal(sub, 0, 1, precision) + "ns"
    if width:
        text = text.rjust(width)
    return text


def _style_for(formatted: FormattedDuration, kinds: dict, suffixes: tuple) -> Style:
    color = kinds.get(formatted.kind)
    if color is not None:
        return Style().fg(color)
    if formatted.kind is DurationKind.DEBUG:
        for suffix, suffix_color in suffixes:
            if formatted.text.endswith(suffix):
                return Style().fg(suffix_color)
    return Style()


@dataclass
class Styles:
    """Display styling derived from the palette, toggles and UTF-8 support."""

    palette: Palette = Palette.NO_COLORS
    toggles: ColorToggles = field(default_factory=ColorToggles)
    utf8: bool = False

    def if_utf8(self, utf8: str, ascii: str) -> str:
        """Pick the UTF-8 text when UTF-8 is enabled, else the ASCII text."""
        return utf8 if self.utf8 else ascii

    def time_units(self, nanos: int, precision: int, width: int | None = None) -> Span:
        """A span holding a formatted duration, coloured by its unit.

        With a width the text is right-aligned to it; ``None`` and ``0``
        both mean no padding.
        """
        formatted = self.duration_text(nanos, width or 0, precision)
        if not self.toggles.color_durations or self.palette is Palette.NO_COLORS:
            return Span.raw(formatted.text)
        if self.palette in (Palette.ANSI8, Palette.ANSI16):
            style = _style_for(formatted, _ANSI_KIND_COLORS, _ANSI_SUFFIX_COLORS)
        else:
            style = _style_for(formatted, _INDEXED_KIND_COLORS, _INDEXED_SUFFIX_COLORS)
        return Span.styled(formatted.text, style)

    def duration_text(self, nanos: int, width: int, precision: int) -> FormattedDuration:
        """Format a duration using the coarsest suitable pair of units."""
        secs = nanos // _NANOS_PER_SEC
        leading = max(width - 4, 0)
        if secs >= _SECS_PER_DAY * 100:
            days = secs // _SECS_PER_DAY
            return FormattedDuration(DurationKind.DAYS, f"{str(days).rjust(width)}d")
        if secs >= _SECS_PER_DAY:
            hours = secs // _SECS_PER_HOUR
            text = f"{str(hours // 24).rjust(leading)}d{hours % 24:02d}h"
            return FormattedDuration(DurationKind.DAYS_HOURS, text)
        if secs >= _SECS_PER_HOUR:
            mins = secs // _SECS_PER_MINUTE
            text = f"{str(mins // 60).rjust(leading)}h{mins % 60:02d}m"
            return FormattedDuration(DurationKind.HOURS_MINUTES, text)
        if secs >= _SECS_PER_MINUTE:
            text = f"{str(secs // 60).rjust(leading)}m{secs % 60:02d}s"
            return FormattedDuration(DurationKind.MINUTES_SECONDS, text)

        text = format_debug_duration(nanos, precision, width)
        if not self.utf8:
            offset = text.find("µs")
            if offset >= 0:
                text = text[:offset] + "us"
        return FormattedDuration(DurationKind.DEBUG, text)

    def terminated(self) -> Style:
        """The style for rows of things that have finished or been dropped."""
        if not self.toggles.color_terminated:
            return Style()
        return Style().add_modifier(Modifier.DIM)

    def fg(self, color: AnyColor) -> Style:
        """A style with ``color`` as foreground, if the palette allows it."""
        allowed = self.color(color)
        return Style().fg(allowed) if allowed is not None else Style()

    def warning_wide(self) -> Span:
        """A warning sign for lists of warnings."""
        return Span.styled(
            self.if_utf8("\u26a0 ", "/!\\ "),
            self.fg(Color.LIGHT_YELLOW).add_modifier(Modifier.BOLD),
        )

    def warning_narrow(self) -> Span:
        """A compact warning sign for table cells."""
        return Span.styled(
            self.if_utf8("\u26a0 ", "! "),
            self.fg(Color.LIGHT_YELLOW).add_modifier(Modifier.BOLD),
        )

    def selected(self, value: str) -> Span:
        """A span marking a selected header."""
        cyan = self.color(Color.CYAN)
        if cyan is not None:
            style = Style().fg(cyan)
        else:
            style = Style().remove_modifier(Modifier.REVERSED)
        return Span.styled(value, style)

    def ascending(self, value: str) -> Span:
        """A selected header with an ascending-sort marker."""
        return self.selected(value + self.if_utf8("▵", "+"))

    def descending(self, value: str) -> Span:
        """A selected header with a descending-sort marker."""
        return self.selected(value + self.if_utf8("▿", "-"))

    def color(self, color: AnyColor) -> AnyColor | None:
        """The colour to use for ``color`` under this palette, or ``None``."""
        palette = self.palette
        if palette is Palette.NO_COLORS:
            return None
        if palette is Palette.ALL:
            return color
        if isinstance(color, RgbColor):
            return None
        if palette is Palette.ANSI256:
            return color
        if isinstance(color, IndexedColor):
            return None
        if palette is Palette.ANSI16:
            return color
        return _ANSI8_TRANSLATIONS.get(color, color)

    def border_block(self) -> Block:
        """A rounded bordered block when UTF-8 is enabled, else a plain one."""
        if self.utf8:
            return Block(borders=True, rounded=True)
        return Block()