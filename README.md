# consoleview

`consoleview` is the view model of a console for watching the tasks and
resources of an async runtime. It uses only the standard library. It builds
the content that a terminal UI shows and keeps the state that decides which
view is shown:

- `consoleview.text`: styled text (`Span`, `Line`, `Style`, `Color`,
  `IndexedColor`, `RgbColor`, `Modifier`, `bold`)
- `consoleview.styles`: colour palettes (`Palette`, `ColorToggles`),
  duration formatting (`Styles.time_units`, `Styles.duration_text`,
  `format_debug_duration`) and titled border blocks (`Block`)
- `consoleview.warnings`: warnings for tasks (`SelfWakePercent`,
  `LostWaker`) and the `Linter` that counts the tasks holding them
- `consoleview.controls`: control hints (`ControlDisplay`, `KeyDisplay`),
  wrapped to a width by `Controls` or listed one per line by
  `controls_paragraph`
- `consoleview.width`: column widths that grow to fit their contents, up to
  100 characters (`Width`)
- `consoleview.table`: sorting, column selection and scrolling for tables
  (`TableListState`, `KeyCode`, `KeyEvent`, `view_controls`)
- `consoleview.histogram`: duration histograms and a small bar chart of them
  (`DurationHistogram`, `MiniHistogram`, `chart_data`, `bar_levels`)
- `consoleview.percentiles` and `consoleview.durations`: percentile lists
  (`Percentiles`) and how a row's width is shared between the percentiles and
  a histogram (`Durations.split`)
- `consoleview.help`: where the help popup goes (`Rect`, `popup_area`)
- `consoleview.navigation`: switching between the tasks list, the resources
  list and the detail views (`View`, `ViewState`, `UpdateKind`, `TaskView`,
  `ResourceView`)

## Installing

```
pip install .
```

## Formatting durations

Durations are given in nanoseconds.

```python
from consoleview.styles import Palette, Styles

styles = Styles(palette=Palette.parse("256"), utf8=True)
span = styles.time_units(1_500_000, 2, None)
print(span.content)   # "1.50ms"
print(span.style)     # foreground IndexedColor(43), the colour for "ms"
```

From one minute up, durations are shown as two units: `43m02s`, `14h32m`,
`12d03h`. From 100 days on only days are shown, as in `102d`. Below a minute
they are shown in `s`, `ms`, `µs` or `ns`. Without UTF-8, `µs` is written as
`us`.

`Palette.parse` accepts `0`, `8`, `16`, `256`, `all` and `off`. It ignores
case and surrounding whitespace, and any other text raises `ValueError`.
`Styles.color` reports which colour a palette allows for a requested colour,
or `None`.

## Warnings

```python
from consoleview.warnings import Linter, SelfWakePercent

linter = Linter(SelfWakePercent())            # 50% by default
handle = linter.check(task)                   # a handle, or None
linter.count()                                # live handles
```

A task only needs the attributes `self_wake_percent`, `waker_count`,
`is_completed`, `is_running` and `is_awakened`. The count falls as handles
are released.

## Navigating a table

```python
from consoleview.table import KeyCode, KeyEvent, TableListState

table = TableListState(("ID", "Name", "Total"))
table.update_input(KeyEvent(KeyCode.RIGHT))
```

A `TableListState` holds weak references to its rows in `sorted_items`.
Left and right (or `h` and `l`) select a column and wrap around at the ends.
Up and down (or `k` and `j`) scroll with wrap-around. `gg` and `G` jump to
the first and last row, and `i` inverts the sort order. Events that are not
a `KeyEvent` are ignored. `selected_item()` returns the selected row, or
`None`. `retain_live()` drops rows whose objects have gone away.

## Switching views

`View.update_input` takes a key event and returns an `UpdateKind`:

- `?` toggles the help popup, and Esc closes the popup when it is open.
- `t` and `r` show the tasks list and the resources list.
- Enter opens the selected task or resource. In a resource view, Enter opens
  the task of the selected async operation.
- Esc leaves a detail view.

`View.help_content()` gives the lines of the help popup for the current view.

## What it does not do

`consoleview` draws nothing to a terminal. It reads no input from the
keyboard, and it does not connect to a running program to collect task or
resource data. It has no command to run. You supply the tasks, resources and
key events, and you render the lines, spans and areas it produces.

## Running the tests

```
pip install .[test]
pytest
```