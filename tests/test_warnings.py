import gc
from dataclasses import dataclass

import pytest

from consoleview.warnings import Linter, LostWaker, SelfWakePercent


@dataclass
class FakeTask:
    self_wake_percent: int = 0
    waker_count: int = 1
    is_completed: bool = False
    is_running: bool = False
    is_awakened: bool = False


def test_self_wake_default_threshold():
    warning = SelfWakePercent()
    assert warning.min_percent == SelfWakePercent.DEFAULT_PERCENT
    assert warning.check(FakeTask(self_wake_percent=SelfWakePercent.DEFAULT_PERCENT + 1))
    assert not warning.check(FakeTask(self_wake_percent=SelfWakePercent.DEFAULT_PERCENT))


def test_self_wake_custom_threshold():
    warning = SelfWakePercent(10)
    assert warning.check(FakeTask(self_wake_percent=11))
    assert not warning.check(FakeTask(self_wake_percent=10))


def test_self_wake_summary_and_format():
    warning = SelfWakePercent(30)
    assert warning.summary() == "tasks have woken themselves over 30% of the time"
    message = warning.format(FakeTask(self_wake_percent=86))
    assert message.startswith("This task has woken itself for more than 30%")
    assert message.endswith("(86%)")


def test_self_wake_rejects_negative():
    with pytest.raises(ValueError):
        SelfWakePercent(-1)


@pytest.mark.parametrize(
    "task, expected",
    [
        (FakeTask(waker_count=0), True),
        (FakeTask(waker_count=1), False),
        (FakeTask(waker_count=0, is_completed=True), False),
        (FakeTask(waker_count=0, is_running=True), False),
        (FakeTask(waker_count=0, is_awakened=True), False),
    ],
)
def test_lost_waker_check(task, expected):
    assert LostWaker().check(task) is expected


def test_lost_waker_texts():
    warning = LostWaker()
    assert warning.summary() == "tasks have lost their waker"
    assert warning.format(FakeTask(waker_count=0)) == (
        "This task has lost its waker, and will never be woken again."
    )


def test_linter_check_returns_none_when_not_applicable():
    linter = Linter(LostWaker())
    assert linter.check(FakeTask(waker_count=2)) is None
    assert linter.count() == 0


def test_linter_counts_live_handles():
    linter = Linter(LostWaker())
    tasks = [FakeTask(waker_count=0), FakeTask(waker_count=1), FakeTask(waker_count=0)]
    handles = [h for h in (linter.check(t) for t in tasks) if h is not None]
    assert linter.count() == len(handles)
    assert handles[0].count() == linter.count()

    handles.pop()
    gc.collect()
    assert linter.count() == len(handles)

    handles.clear()
    gc.collect()
    assert linter.count() == 0


def test_linter_format_and_summary():
    warning = SelfWakePercent(20)
    linter = Linter(warning)
    task = FakeTask(self_wake_percent=40)
    handle = linter.check(task)
    assert handle.format(task) == warning.format(task)
    assert linter.summary() == warning.summary()
    assert handle.warning is warning


def test_linter_format_rejects_value_without_warning():
    linter = Linter(LostWaker())
    with pytest.raises(ValueError, match="did not have that warning"):
        linter.format(FakeTask(waker_count=3))