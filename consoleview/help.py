"""Placement of the help popup."""

from __future__ import annotations

from dataclasses import dataclass

_MARGIN_PERCENT = 20
_BODY_PERCENT = 60
_MIN_POPUP_HEIGHT = 15


@dataclass(frozen=True)
class Rect:
    """A rectangular screen area."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if min(self.x, self.y, self.width, self.height) < 0:
            raise ValueError("a rectangle cannot have negative coordinates or size")

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


def popup_area(area: Rect) -> Rect:
    """The centred area of the help popup inside ``area``.

    The popup leaves 20% margins on each side horizontally and is at least
    15 rows high where the area allows it, with 20% margins above and below.
    """
    top = area.height * _MARGIN_PERCENT // 100
    height = max(area.height - 2 * top, min(_MIN_POPUP_HEIGHT, area.height - top))
    left = area.width * _MARGIN_PERCENT // 100
    width = area.width * _BODY_PERCENT // 100
    return Rect(area.x + left, area.y + top, width, height)