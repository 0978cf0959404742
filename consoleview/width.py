"""Column widths that grow to fit their contents."""

from __future__ import annotations

from dataclasses import dataclass

MAX_WIDTH = 100


@dataclass
class Width:
    """A column width that only grows, up to a cap of 100 characters."""

    current: int = 0

    def update_str(self, text: str) -> str:
        """Widen to fit ``text`` and hand it back unchanged."""
        self.update_len(len(text))
        return text

    def update_len(self, length: int) -> None:
        """Widen to at least ``length``, never beyond the cap."""
        self.current = min(max(self.current, length), MAX_WIDTH)

    def chars(self) -> int:
        """The current width in characters."""
        return self.current