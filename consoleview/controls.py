"""Descriptions of the key controls available in each view."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from consoleview.styles import Styles
from consoleview.text import Line, Span, bold


@dataclass(frozen=True)
class KeyDisplay:
    """A key as shown to the user.

    ``base`` is an ASCII description; ``utf8`` is an optional richer
    description used when the terminal supports UTF-8.
    """

    base: str
    utf8: str | None = None


@dataclass(frozen=True)
class ControlDisplay:
    """An action together with the keys that trigger it."""

    action: str
    keys: tuple[KeyDisplay, ...]

    def to_spans(self, styles: Styles, indent: int = 0) -> Line:
        """Render the control as ``<indent><action> = <key> or <key>``."""
        spans = [Span.raw(" " * indent), Span.raw(self.action), Span.raw(" = ")]
        for position, key in enumerate(self.keys):
            if position:
                spans.append(Span.raw(" or "))
            text = key.base if key.utf8 is None else styles.if_utf8(key.utf8, key.base)
            spans.append(bold(text))
        return Line(spans)


UNIVERSAL_CONTROLS: tuple[ControlDisplay, ...] = (
    ControlDisplay("toggle pause", (KeyDisplay("space"),)),
    ControlDisplay("quit", (KeyDisplay("q"),)),
)

_SEPARATOR = Span.raw(", ")


class Controls:
    """The controls of a view, wrapped into lines no wider than ``width``.

    The first control on a line is always placed, even when it is wider
    than the available space.
    """

    def __init__(
        self, view_controls: Iterable[ControlDisplay], width: int, styles: Styles
    ) -> None:
        entries = [
            control.to_spans(styles, 0)
            for control in (*view_controls, *UNIVERSAL_CONTROLS)
        ]
        lines = [Line([Span.raw("controls: ")])]
        for position, entry in enumerate(entries):
            current = lines[-1]
            if position == 0 or current.width() == 0:
                current.spans.extend(entry.spans)
                continue
            total = current.width() + _SEPARATOR.width() + entry.width()
            current.spans.append(_SEPARATOR)
            if total <= width:
                current.spans.extend(entry.spans)
            else:
                lines.append(entry)
        self._lines = lines

    @property
    def lines(self) -> list[Line]:
        """The wrapped lines of text."""
        return list(self._lines)

    def height(self) -> int:
        """The number of lines the controls take up."""
        return len(self._lines)


def controls_paragraph(view_controls: Iterable[ControlDisplay], styles: Styles) -> list[Line]:
    """The controls listed one per line, as shown in the help popup."""
    lines = [Line([Span.raw("controls:")])]
    lines.extend(control.to_spans(styles, 2) for control in view_controls)
    lines.extend(control.to_spans(styles, 2) for control in UNIVERSAL_CONTROLS)
    return lines