"""Warnings detected on monitored entities and the linters that count them."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Generic, Optional, Protocol, TypeVar

T = TypeVar("T")


class TaskLike(Protocol):
    """The task attributes the task warnings look at."""

    self_wake_percent: int
    waker_count: int
    is_completed: bool
    is_running: bool
    is_awakened: bool


class Warn(ABC, Generic[T]):
    """Detects one kind of warning and describes it."""

    @abstractmethod
    def check(self, value: T) -> bool:
        """Whether the warning applies to ``value``."""

    @abstractmethod
    def format(self, value: T) -> str:
        """A full sentence describing the warning for ``value``."""

    @abstractmethod
    def summary(self) -> str:
        """A sentence fragment summarising the warning, to follow a count."""


class Linter(Generic[T]):
    """Wraps a warning and counts the entities currently holding it.

    :meth:`check` hands out a handle for each entity the warning applies to;
    :meth:`count` reports how many of those handles are still alive.
    """

    def __init__(self, warning: Warn[T], _holders: Optional[weakref.WeakSet] = None) -> None:
        self._warning = warning
        self._holders: weakref.WeakSet = weakref.WeakSet() if _holders is None else _holders

    @property
    def warning(self) -> Warn[T]:
        return self._warning

    def check(self, value: T) -> Optional[Linter[T]]:
        """Return a handle on this linter if the warning applies to ``value``."""
        if not self._warning.check(value):
            return None
        handle = Linter(self._warning, self._holders)
        self._holders.add(handle)
        return handle

    def count(self) -> int:
        """The number of entities that currently hold this warning."""
        return len(self._holders)

    def format(self, value: T) -> str:
        """Describe the warning for ``value``, which must have it."""
        if not self._warning.check(value):
            raise ValueError(
                f"tried to format a warning for a {type(value).__name__} "
                "that did not have that warning!"
            )
        return self._warning.format(value)

    def summary(self) -> str:
        return self._warning.summary()

    def __repr__(self) -> str:
        return f"Linter({self._warning!r})"


@dataclass(frozen=True)
class SelfWakePercent(Warn[TaskLike]):
    """Tasks that have woken themselves for too many of their wakeups."""

    DEFAULT_PERCENT: ClassVar[int] = 50

    min_percent: int = DEFAULT_PERCENT

    def __post_init__(self) -> None:
        if self.min_percent < 0:
            raise ValueError("min_percent must not be negative")

    def check(self, task: TaskLike) -> bool:
        return task.self_wake_percent > self.min_percent

    def format(self, task: TaskLike) -> str:
        return (
            f"This task has woken itself for more than {self.min_percent}% "
            f"of its total wakeups ({task.self_wake_percent}%)"
        )

    def summary(self) -> str:
        return f"tasks have woken themselves over {self.min_percent}% of the time"


@dataclass(frozen=True)
class LostWaker(Warn[TaskLike]):
    """Unfinished tasks that nothing can wake any more."""

    def check(self, task: TaskLike) -> bool:
        return (
            not task.is_completed
            and task.waker_count == 0
            and not task.is_running
            and not task.is_awakened
        )

    def format(self, task: TaskLike) -> str:
        return "This task has lost its waker, and will never be woken again."

    def summary(self) -> str:
        return "tasks have lost their waker"