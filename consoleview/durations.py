"""Percentiles beside a mini histogram, sharing the available width."""

from __future__ import annotations

from dataclasses import dataclass

from consoleview.histogram import DurationHistogram, MiniHistogram
from consoleview.percentiles import Percentiles
from consoleview.styles import Styles

# Wide enough for a legend such as "0647.17µs  909.31µs" between borders.
MIN_HISTOGRAM_BLOCK_WIDTH = 22
_MIN_PERCENTILE_LINE = 13


@dataclass
class Durations:
    """Duration percentiles and, when there is room and UTF-8, a histogram."""

    styles: Styles
    histogram: DurationHistogram | None = None
    percentiles_title: str = "Percentiles"
    histogram_title: str = "Histogram"
    percentiles_width: int = 0

    def split(self, width: int) -> tuple[int, int | None]:
        """The widths of the percentiles and histogram parts, if any histogram."""
        if not self.styles.utf8:
            return width, None
        if self.percentiles_width > 0:
            left = self.percentiles_width
        else:
            left = max(len(self.percentiles_title), _MIN_PERCENTILE_LINE) + 2
        if width < left + MIN_HISTOGRAM_BLOCK_WIDTH:
            return width, None
        return left, width - left

    def percentiles(self) -> Percentiles:
        """The percentiles part."""
        return Percentiles(self.styles, self.histogram, self.percentiles_title)

    def mini_histogram(self) -> MiniHistogram:
        """The histogram part."""
        return MiniHistogram(
            histogram=self.histogram,
            block=self.styles.border_block().title(self.histogram_title),
            duration_precision=2,
        )