"""A list of duration percentiles taken from a histogram."""

from __future__ import annotations

from dataclasses import dataclass

from consoleview.histogram import DurationHistogram
from consoleview.styles import Styles
from consoleview.text import Line, bold

DUR_LIST_PRECISION = 2
PERCENTILES = (10, 25, 50, 75, 90, 95, 99)


@dataclass
class Percentiles:
    """Shows the main percentiles of a duration histogram, one per line."""

    styles: Styles
    histogram: DurationHistogram | None = None
    title: str = "Percentiles"

    def lines(self) -> list[Line]:
        """One ``pNN: <duration>`` line per percentile; none without data."""
        if self.histogram is None:
            return []
        return [
            Line(
                [
                    bold(f"p{percentile:>2}: "),
                    self.styles.time_units(
                        self.histogram.value_at_percentile(percentile), DUR_LIST_PRECISION
                    ),
                ]
            )
            for percentile in PERCENTILES
        ]