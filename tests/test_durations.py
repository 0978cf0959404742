from consoleview.durations import MIN_HISTOGRAM_BLOCK_WIDTH, Durations
from consoleview.histogram import DurationHistogram
from consoleview.styles import Styles


def test_no_utf8_no_histogram():
    assert Durations(Styles(utf8=False)).split(200) == (200, None)


def test_fixed_width_split():
    durations = Durations(Styles(utf8=True), percentiles_width=20)
    left, right = durations.split(100)
    assert left == 20
    assert left + right == 100


def test_too_narrow_for_histogram():
    durations = Durations(Styles(utf8=True), percentiles_width=20)
    narrow = 20 + MIN_HISTOGRAM_BLOCK_WIDTH - 1
    assert durations.split(narrow) == (narrow, None)
    assert durations.split(narrow + 1) == (20, MIN_HISTOGRAM_BLOCK_WIDTH)


def test_default_width_short_title():
    assert Durations(Styles(utf8=True)).split(100)[0] == 15


def test_default_width_follows_long_title():
    title = "Poll Times Percentiles"
    durations = Durations(Styles(utf8=True), percentiles_title=title)
    assert durations.split(100)[0] == len(title) + 2


def test_parts_carry_titles_and_data():
    hist = DurationHistogram([1000])
    durations = Durations(
        Styles(utf8=True), hist, percentiles_title="Poll", histogram_title="Poll Hist"
    )
    assert durations.percentiles().title == "Poll"
    assert durations.percentiles().histogram is hist
    widget = durations.mini_histogram()
    assert widget.histogram is hist
    assert widget.duration_precision == 2
    assert widget.block.title_line.plain() == "Poll Hist"
    assert widget.block.borders