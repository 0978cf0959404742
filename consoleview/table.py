"""Selection, sorting and scrolling state shared by the table views."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Mapping, Sequence, TypeVar

from consoleview.controls import ControlDisplay, KeyDisplay, controls_paragraph
from consoleview.styles import Styles
from consoleview.text import Line

R = TypeVar("R")
S = TypeVar("S")


class KeyCode(Enum):
    """Keys that are not plain characters."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    ESC = "esc"
    BACKSPACE = "backspace"
    TAB = "tab"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    DELETE = "delete"


@dataclass(frozen=True)
class KeyEvent:
    """A key press; ``code`` is a :class:`KeyCode` or a single character."""

    code: KeyCode | str

    def __post_init__(self) -> None:
        if isinstance(self.code, str) and len(self.code) != 1:
            raise ValueError(f"a character key must be one character: {self.code!r}")


@dataclass
class TableListState(Generic[R, S]):
    """The state of a sortable, scrollable table of weakly held rows.

    ``sort_columns`` maps the columns that can be sorted on to their sort
    orders. Rows are kept as weak references in ``sorted_items``.
    """

    header: Sequence[str]
    sort_columns: Mapping[int, S] = field(default_factory=dict)
    sort_by: S | None = None
    sorted_items: list[weakref.ref] = field(default_factory=list)
    selected_column: int = 0
    sort_descending: bool = False
    selected: int | None = None
    _last_key_event: KeyEvent | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.header = tuple(self.header)
        if not self.header:
            raise ValueError("a table needs at least one column")
        if self.sort_by is not None:
            columns = [col for col, sort in self.sort_columns.items() if sort == self.sort_by]
            if not columns:
                raise ValueError(f"no column sorts by {self.sort_by!r}")
            self.selected_column = columns[0]

    def __len__(self) -> int:
        return len(self.sorted_items)

    def update_input(self, event: Any) -> None:
        """Handle an input event; anything but a key press is ignored."""
        if isinstance(event, KeyEvent):
            self.key_input(event)

    def key_input(self, event: KeyEvent) -> None:
        """Move the column selection, invert the sort or scroll."""
        code = event.code
        last_column = len(self.header) - 1
        if code in (KeyCode.LEFT, "h"):
            self.selected_column = (
                last_column if self.selected_column == 0 else self.selected_column - 1
            )
        elif code in (KeyCode.RIGHT, "l"):
            self.selected_column = (
                0 if self.selected_column == last_column else self.selected_column + 1
            )
        elif code == "i":
            self.sort_descending = not self.sort_descending
        elif code in (KeyCode.DOWN, "j"):
            self.scroll_next()
        elif code in (KeyCode.UP, "k"):
            self.scroll_prev()
        elif code == "G":
            self.scroll_to_last()
        elif code == "g" and self._last_key_event is not None and self._last_key_event.code == "g":
            self.scroll_to_first()

        sort = self.sort_columns.get(self.selected_column)
        if sort is not None:
            self.sort_by = sort
        self._last_key_event = event

    def _scroll_with(self, step: Callable[[int, int], int]) -> None:
        if not self.sorted_items:
            self.selected = None
            return
        current = self.selected if self.selected is not None else 0
        self.selected = step(len(self.sorted_items), current)

    def scroll_next(self) -> None:
        """Select the next row, wrapping to the first."""
        self._scroll_with(lambda count, i: 0 if i >= count - 1 else i + 1)

    def scroll_prev(self) -> None:
        """Select the previous row, wrapping to the last."""
        self._scroll_with(lambda count, i: count - 1 if i == 0 else i - 1)

    def scroll_to_last(self) -> None:
        """Select the last row."""
        self._scroll_with(lambda count, _: count - 1)

    def scroll_to_first(self) -> None:
        """Select the first row."""
        self._scroll_with(lambda _count, _i: 0)

    def selected_item(self) -> R | None:
        """The selected row, or ``None`` if nothing is selected or it is gone.

        Rows are displayed in reverse when the sort is not descending.
        """
        if self.selected is None:
            return None
        count = len(self.sorted_items)
        index = self.selected if self.sort_descending else count - self.selected - 1
        if not 0 <= index < count:
            raise IndexError(f"selected row {self.selected} is out of range")
        return self.sorted_items[index]()

    def retain_live(self) -> None:
        """Drop rows whose objects no longer exist."""
        self.sorted_items = [ref for ref in self.sorted_items if ref() is not None]

    def help_content(self, styles: Styles) -> list[Line]:
        """The lines shown in the help popup for a table view."""
        return controls_paragraph(view_controls(), styles)


_VIEW_CONTROLS: tuple[ControlDisplay, ...] = (
    ControlDisplay(
        "select column (sort)",
        (KeyDisplay("left, right", "\u2190\u2192"), KeyDisplay("h, l")),
    ),
    ControlDisplay(
        "scroll",
        (KeyDisplay("up, down", "\u2191\u2193"), KeyDisplay("k, j")),
    ),
    ControlDisplay("view details", (KeyDisplay("enter", "\u21b5"),)),
    ControlDisplay("invert sort (highest/lowest)", (KeyDisplay("i"),)),
    ControlDisplay("scroll to top", (KeyDisplay("gg"),)),
    ControlDisplay("scroll to bottom", (KeyDisplay("G"),)),
)


def view_controls() -> tuple[ControlDisplay, ...]:
    """The controls available in every table view."""
    return _VIEW_CONTROLS