"""Duration histograms and a compact bar-chart view of them."""

from __future__ import annotations

from bisect import bisect_left, insort
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from consoleview.styles import Block, format_debug_duration


class DurationHistogram:
    """Recorded durations in nanoseconds, with a note of dropped high outliers."""

    def __init__(
        self,
        values: Sequence[int] = (),
        high_outliers: int = 0,
        highest_outlier: int | None = None,
    ) -> None:
        if high_outliers < 0:
            raise ValueError("high_outliers must not be negative")
        self.high_outliers = high_outliers
        self.highest_outlier = highest_outlier
        self._counts: Counter[int] = Counter()
        self._keys: list[int] = []
        for value in values:
            self.record(value)

    def record(self, nanos: int) -> None:
        """Record one duration."""
        if nanos < 0:
            raise ValueError("duration must not be negative")
        if nanos not in self._counts:
            insort(self._keys, nanos)
        self._counts[nanos] += 1

    @property
    def total_count(self) -> int:
        """The number of recorded durations."""
        return sum(self._counts.values())

    @property
    def max(self) -> int:
        """The largest recorded duration, or 0 when empty."""
        return self._keys[-1] if self._keys else 0

    @property
    def min(self) -> int:
        """The smallest recorded duration, or 0 when empty."""
        return self._keys[0] if self._keys else 0

    def value_at_percentile(self, percentile: float) -> int:
        """The smallest recorded value covering ``percentile`` percent of records."""
        total = self.total_count
        if total == 0:
            return 0
        percentile = min(max(percentile, 0.0), 100.0)
        target = max(-(-int(percentile * total * 1_000_000) // 100_000_000), 1)
        seen = 0
        for key in self._keys:
            seen += self._counts[key]
            if seen >= target:
                return key
        return self._keys[-1]

    def iter_linear(self, step: int) -> Iterator[tuple[int, int]]:
        """Yield ``(highest value, count)`` for buckets of ``step`` from zero to the max."""
        return self._linear_buckets(step, 0)

    def _linear_buckets(self, step: int, first_bucket: int) -> Iterator[tuple[int, int]]:
        if step <= 0:
            raise ValueError("step must be positive")
        if not self._keys:
            return
        top = self._keys[-1]
        lower = first_bucket * step
        while lower <= top:
            upper = lower + step
            start = bisect_left(self._keys, lower)
            end = bisect_left(self._keys, upper)
            yield upper - 1, sum(self._counts[key] for key in self._keys[start:end])
            lower = upper


@dataclass(frozen=True)
class HistogramMetadata:
    """Figures shown in the legend of a mini histogram."""

    max_value: int = 0
    min_value: int = 0
    max_bucket: int = 0
    high_outliers: int = 0
    highest_outlier: int | None = None


@dataclass(frozen=True)
class BarSet:
    """Nine symbols for bar heights from empty to full in eighths."""

    levels: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.levels) != 9:
            raise ValueError("a bar set needs exactly nine symbols")


NINE_LEVELS = BarSet((" ", "▁", "▂", "▃", "▄", "▅", "▆", "▇", "█"))


def chart_data(
    histogram: DurationHistogram, width: int
) -> tuple[list[int], HistogramMetadata]:
    """Bucket the histogram into about ``width`` columns, leading empties dropped."""
    if width <= 0:
        raise ValueError("chart width must be positive")
    spread = histogram.max - histogram.min
    step = -(-spread // width) + 1
    # Starting at the bucket holding the minimum drops the leading empty buckets.
    data = [count for _, count in histogram._linear_buckets(step, histogram.min // step)]
    metadata = HistogramMetadata(
        max_value=histogram.max,
        min_value=histogram.min,
        max_bucket=max(data, default=0),
        high_outliers=histogram.high_outliers,
        highest_outlier=histogram.highest_outlier,
    )
    return data, metadata


def bar_levels(
    data: Sequence[int], width: int, height: int, maximum: int | None = None
) -> list[list[int]]:
    """Bar heights in eighths (0 to 8) per cell, rows listed top to bottom.

    Any value above zero gets at least one eighth, however small it is.
    """
    top = maximum if maximum is not None else max(data, default=1)
    levels = []
    for value in data[: max(width, 0)]:
        if top == 0:
            level = 0
        else:
            level = value * height * 8 // top
            if value > 0 and level == 0:
                level = 1
        levels.append(level)
    rows = []
    for _ in range(max(height, 0)):
        rows.append([min(level, 8) for level in levels])
        levels = [max(level - 8, 0) for level in levels]
    rows.reverse()
    return rows


def _put(grid: list[list[str]], x: int, y: int, text: str) -> None:
    if not 0 <= y < len(grid):
        return
    row = grid[y]
    for offset, char in enumerate(text):
        column = x + offset
        if 0 <= column < len(row):
            row[column] = char


@dataclass
class MiniHistogram:
    """A small bar chart of a histogram with count and duration labels."""

    histogram: DurationHistogram | None = None
    block: Block | None = None
    maximum: int | None = None
    bar_set: BarSet = field(default=NINE_LEVELS)
    duration_precision: int = 4

    def render(self, width: int, height: int) -> list[str]:
        """The text inside the block for an area of ``width`` by ``height``."""
        if self.block is not None and self.block.borders:
            width -= 2
            height -= 2
        width = max(width, 0)
        if height < 1:
            return []
        grid = [[" "] * width for _ in range(height)]
        if self.histogram is None:
            return ["".join(row) for row in grid]

        # The label width is not known before bucketing, so assume three digits.
        data, metadata = chart_data(self.histogram, width - 3)
        max_qty_label = str(metadata.max_bucket)
        max_label = format_debug_duration(metadata.max_value, self.duration_precision)
        min_label = format_debug_duration(metadata.min_value, self.duration_precision)

        if metadata.high_outliers > 0:
            if metadata.highest_outlier is None:
                raise ValueError("if there are outliers, the highest should be set")
            note = (
                f"{metadata.high_outliers} outliers "
                f"(highest: {format_debug_duration(metadata.highest_outlier)})"
            )
            _put(grid, width - len(note), height - 1, note)
            labels_row = height - 2
        else:
            labels_row = height - 1
        _put(grid, 0, 0, max_qty_label)
        _put(grid, len(max_qty_label), labels_row, min_label)
        _put(grid, width - len(max_label), labels_row, max_label)

        legend_height = 2 if metadata.high_outliers > 0 else 1
        left = len(max_qty_label)
        bars = bar_levels(data, width - left, height - legend_height, self.maximum)
        for y, row in enumerate(bars):
            for x, level in enumerate(row):
                _put(grid, left + x, y, self.bar_set.levels[level])
        return ["".join(row) for row in grid]