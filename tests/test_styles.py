import pytest

from consoleview.styles import (
    Block,
    ColorToggles,
    DurationKind,
    Palette,
    Styles,
    format_debug_duration,
)
from consoleview.text import Color, IndexedColor, Modifier, RgbColor, Span, Style

SEC = 1_000_000_000
HOUR = 3600 * SEC
DAY = 24 * HOUR


@pytest.mark.parametrize("palette", list(Palette))
def test_palette_parse_round_trip(palette):
    assert Palette.parse(palette.value) is palette


@pytest.mark.parametrize(
    "text, expected",
    [("0", Palette.NO_COLORS), (" 256 ", Palette.ANSI256), ("ALL", Palette.ALL), ("Off", Palette.NO_COLORS)],
)
def test_palette_parse_variants(text, expected):
    assert Palette.parse(text) is expected


def test_palette_parse_invalid():
    with pytest.raises(ValueError, match="invalid color palette"):
        Palette.parse("12")


def test_debug_duration_with_precision():
    assert format_debug_duration(1_500_000, 2) == "1.50ms"


def test_debug_duration_without_precision_trims_zeros():
    assert format_debug_duration(2 * SEC) == format_debug_duration(2 * SEC, 0)


def test_debug_duration_width_right_aligns():
    text = format_debug_duration(1_500_000, 0, 6)
    assert len(text) == 6
    assert text.startswith(" ")
    assert text.endswith("ms")


def test_debug_duration_units():
    assert format_debug_duration(32).endswith("ns")
    assert format_debug_duration(1_500).endswith("µs")
    assert format_debug_duration(3 * SEC).endswith("s")


def test_debug_duration_negative():
    with pytest.raises(ValueError):
        format_debug_duration(-1)


def test_minutes_seconds():
    formatted = Styles().duration_text(90 * SEC, 0, 0)
    assert formatted.kind is DurationKind.MINUTES_SECONDS
    assert formatted.text == "1m30s"


def test_days_hours():
    formatted = Styles().duration_text(25 * HOUR, 0, 0)
    assert formatted.kind is DurationKind.DAYS_HOURS
    assert formatted.text == "1d01h"


def test_hours_minutes_and_days():
    assert Styles().duration_text(2 * HOUR, 0, 0).kind is DurationKind.HOURS_MINUTES
    days = Styles().duration_text(150 * DAY, 0, 0)
    assert days.kind is DurationKind.DAYS
    assert days.text.endswith("d")


def test_width_pads_compound_units():
    plain = Styles().duration_text(25 * HOUR, 0, 0).text
    padded = Styles().duration_text(25 * HOUR, 10, 0).text
    assert len(padded) == 10
    assert padded.strip() == plain


def test_ascii_microseconds():
    ascii_text = Styles(utf8=False).duration_text(1_500, 0, 2).text
    utf8_text = Styles(utf8=True).duration_text(1_500, 0, 2).text
    assert ascii_text.endswith("us")
    assert "µ" not in ascii_text
    assert utf8_text.endswith("µs")
    assert ascii_text[:-2] == utf8_text[:-2]


def test_time_units_without_colors():
    span = Styles(palette=Palette.NO_COLORS).time_units(1_500_000, 0, 6)
    assert span.style == Style()
    assert len(span.content) == 6


def test_time_units_ansi16_colors():
    styles = Styles(palette=Palette.ANSI16)
    assert styles.time_units(1_500_000, 0).style.foreground is Color.RED
    assert styles.time_units(3 * SEC, 0).style.foreground is Color.YELLOW
    assert styles.time_units(90 * SEC, 0).style.foreground is Color.GREEN


def test_time_units_ansi16_ascii_micros():
    styles = Styles(palette=Palette.ANSI16, utf8=False)
    assert styles.time_units(1_500, 0).style.foreground is Color.MAGENTA


def test_time_units_256_colors():
    styles = Styles(palette=Palette.ANSI256)
    assert styles.time_units(1_500_000, 0).style.foreground == IndexedColor(43)
    assert styles.time_units(25 * HOUR, 0).style.foreground == IndexedColor(33)


def test_time_units_toggle_off():
    styles = Styles(palette=Palette.ALL, toggles=ColorToggles(color_durations=False))
    assert styles.time_units(1_500_000, 0).style == Style()


def test_color_rules():
    rgb = RgbColor(1, 2, 3)
    assert Styles(palette=Palette.NO_COLORS).color(Color.RED) is None
    assert Styles(palette=Palette.ALL).color(rgb) == rgb
    assert Styles(palette=Palette.ANSI256).color(rgb) is None
    assert Styles(palette=Palette.ANSI256).color(IndexedColor(5)) == IndexedColor(5)
    assert Styles(palette=Palette.ANSI16).color(IndexedColor(5)) is None
    assert Styles(palette=Palette.ANSI16).color(Color.LIGHT_RED) is Color.LIGHT_RED
    assert Styles(palette=Palette.ANSI8).color(Color.LIGHT_RED) is Color.RED
    assert Styles(palette=Palette.ANSI8).color(Color.CYAN) is Color.CYAN
    assert Styles(palette=Palette.ANSI8).color(IndexedColor(5)) is None


def test_fg():
    assert Styles(palette=Palette.ANSI8).fg(Color.LIGHT_YELLOW).foreground is Color.YELLOW
    assert Styles(palette=Palette.NO_COLORS).fg(Color.LIGHT_YELLOW) == Style()


def test_terminated():
    assert Modifier.DIM in Styles().terminated().added
    toggled = Styles(toggles=ColorToggles(color_terminated=False))
    assert toggled.terminated() == Style()


def test_selected():
    assert Styles(palette=Palette.ANSI16).selected("ID").style.foreground is Color.CYAN
    plain = Styles().selected("ID")
    assert Modifier.REVERSED in plain.style.removed
    assert plain.content == "ID"


def test_sort_markers():
    utf8 = Styles(utf8=True)
    ascii_styles = Styles(utf8=False)
    assert utf8.ascending("ID").content == "ID▵"
    assert utf8.descending("ID").content == "ID▿"
    assert ascii_styles.ascending("ID").content == "ID+"
    assert ascii_styles.descending("ID").content == "ID-"


def test_warning_signs():
    assert Styles(utf8=False).warning_wide().content == "/!\\ "
    assert Styles(utf8=False).warning_narrow().content == "! "
    assert Styles(utf8=True).warning_wide().content == "\u26a0 "
    assert Modifier.BOLD in Styles().warning_wide().style.added


def test_if_utf8():
    assert Styles(utf8=True).if_utf8("a", "b") == "a"
    assert Styles(utf8=False).if_utf8("a", "b") == "b"


def test_border_block():
    assert Styles(utf8=True).border_block() == Block(borders=True, rounded=True)
    assert Styles(utf8=False).border_block() == Block()


def test_block_title():
    block = Styles(utf8=True).border_block().title("Help")
    assert block.title_line.plain() == "Help"
    titled = block.title([Span.raw("Tasks "), Span.raw("(3)")])
    assert titled.title_line.plain() == "Tasks (3)"
    assert titled.borders