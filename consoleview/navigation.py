"""Switching between the task, resource and detail views in response to keys."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Optional

from consoleview.controls import ControlDisplay, KeyDisplay, controls_paragraph
from consoleview.styles import Styles
from consoleview.table import KeyCode, KeyEvent, TableListState, view_controls
from consoleview.text import Line

TASKS_HEADER = (
    "Warn",
    "ID",
    "State",
    "Name",
    "Total",
    "Busy",
    "Sched",
    "Idle",
    "Polls",
    "Target",
    "Location",
    "Fields",
)
RESOURCES_HEADER = (
    "ID",
    "Parent",
    "Kind",
    "Total",
    "Target",
    "Type",
    "Vis",
    "Location",
    "Attributes",
)
ASYNC_OPS_HEADER = (
    "ID",
    "Parent",
    "Task",
    "Source",
    "Total",
    "Busy",
    "Idle",
    "Polls",
    "Attributes",
)

HELP_TOGGLE_KEY = "?"


@dataclass(frozen=True)
class UpdateKind:
    """What an input event changed, with the span ID of a newly selected item."""

    class Action(Enum):
        SELECT_TASK = auto()
        EXIT_TASK_VIEW = auto()
        SELECT_RESOURCE = auto()
        OTHER = auto()

    action: Action = Action.OTHER
    span_id: Optional[int] = None

    @classmethod
    def select_task(cls, span_id: int) -> UpdateKind:
        return cls(cls.Action.SELECT_TASK, span_id)

    @classmethod
    def select_resource(cls, span_id: int) -> UpdateKind:
        return cls(cls.Action.SELECT_RESOURCE, span_id)

    @classmethod
    def exit_task_view(cls) -> UpdateKind:
        return cls(cls.Action.EXIT_TASK_VIEW)

    @classmethod
    def other(cls) -> UpdateKind:
        return cls(cls.Action.OTHER)


class ViewState(Enum):
    """Which view is currently shown."""

    TASKS_LIST = auto()
    RESOURCES_LIST = auto()
    TASK_INSTANCE = auto()
    RESOURCE_INSTANCE = auto()


def task_view_controls() -> tuple[ControlDisplay, ...]:
    """The controls available when inspecting a single task."""
    return (
        ControlDisplay(
            "return to task list", (KeyDisplay("esc", "\u238b esc"),)
        ),
    )


def resource_view_controls() -> tuple[ControlDisplay, ...]:
    """The controls available when inspecting a single resource."""
    return task_view_controls() + tuple(view_controls())


def truncate_location(location: str, max_width: int, styles: Styles) -> str:
    """Shorten ``location`` to ``max_width`` characters, eliding its start."""
    if max_width < 0:
        raise ValueError("max_width must not be negative")
    if len(location) <= max_width:
        return location
    ellipsis = styles.if_utf8("\u2026", "...")
    start = len(location) - max_width + len(ellipsis)
    return ellipsis + location[start:]


def _is_key(event: Any, code: KeyCode | str) -> bool:
    return isinstance(event, KeyEvent) and event.code == code


@dataclass
class TaskView:
    """Inspection of a single task. It has no controls beyond leaving it."""

    task: Any
    details: Any = None

    def help_content(self, styles: Styles) -> list[Line]:
        return controls_paragraph(task_view_controls(), styles)


@dataclass
class ResourceView:
    """Inspection of a single resource and its async operations."""

    resource: Any
    async_ops_table: TableListState = field(
        default_factory=lambda: TableListState(ASYNC_OPS_HEADER)
    )
    initial_render: bool = True

    def update_input(self, event: Any) -> None:
        self.async_ops_table.update_input(event)

    def help_content(self, styles: Styles) -> list[Line]:
        return controls_paragraph(resource_view_controls(), styles)


@dataclass
class View:
    """The console's views and the state that selects between them.

    The task list is kept while other views are shown, so its selection and
    sorting survive a return to it.
    """

    styles: Styles = field(default_factory=Styles)
    tasks_list: TableListState = field(
        default_factory=lambda: TableListState(TASKS_HEADER)
    )
    resources_list: TableListState = field(
        default_factory=lambda: TableListState(RESOURCES_HEADER)
    )
    state: ViewState = ViewState.TASKS_LIST
    show_help_modal: bool = False
    task_view: Optional[TaskView] = None
    resource_view: Optional[ResourceView] = None
    details: Any = None

    def _should_toggle_help_modal(self, event: Any) -> bool:
        return _is_key(event, HELP_TOGGLE_KEY) or (
            self.show_help_modal and _is_key(event, KeyCode.ESC)
        )

    def _open_task(self, task: Any) -> UpdateKind:
        self.task_view = TaskView(task, self.details)
        self.state = ViewState.TASK_INSTANCE
        return UpdateKind.select_task(task.span_id)

    def update_input(self, event: Any) -> UpdateKind:
        """Handle an input event and report what it changed."""
        if self._should_toggle_help_modal(event):
            self.show_help_modal = not self.show_help_modal
            return UpdateKind.other()
        if _is_key(event, "t"):
            self.state = ViewState.TASKS_LIST
            return UpdateKind.other()
        if _is_key(event, "r"):
            self.state = ViewState.RESOURCES_LIST
            return UpdateKind.other()

        enter = _is_key(event, KeyCode.ENTER)
        esc = _is_key(event, KeyCode.ESC)

        if self.state is ViewState.TASKS_LIST:
            if not enter:
                self.tasks_list.update_input(event)
                return UpdateKind.other()
            task = self.tasks_list.selected_item()
            return self._open_task(task) if task is not None else UpdateKind.other()

        if self.state is ViewState.RESOURCES_LIST:
            if not enter:
                self.resources_list.update_input(event)
                return UpdateKind.other()
            resource = self.resources_list.selected_item()
            if resource is None:
                return UpdateKind.other()
            self.resource_view = ResourceView(resource)
            self.state = ViewState.RESOURCE_INSTANCE
            return UpdateKind.select_resource(resource.span_id)

        if self.state is ViewState.RESOURCE_INSTANCE:
            if esc:
                self.state = ViewState.RESOURCES_LIST
                return UpdateKind.other()
            view = self.resource_view
            if view is None:
                return UpdateKind.other()
            if not enter:
                view.update_input(event)
                return UpdateKind.other()
            op = view.async_ops_table.selected_item()
            task_id = getattr(op, "task_id", None) if op is not None else None
            if task_id is None:
                return UpdateKind.other()
            live = (ref() for ref in self.tasks_list.sorted_items)
            task = next((t for t in live if t is not None and t.id == task_id), None)
            return self._open_task(task) if task is not None else UpdateKind.other()

        # The task view reacts only to leaving it.
        if esc:
            self.state = ViewState.TASKS_LIST
            return UpdateKind.exit_task_view()
        return UpdateKind.other()

    def help_content(self) -> list[Line]:
        """The lines the help popup shows for the current view."""
        if self.state is ViewState.TASKS_LIST:
            return self.tasks_list.help_content(self.styles)
        if self.state is ViewState.RESOURCES_LIST:
            return self.resources_list.help_content(self.styles)
        if self.state is ViewState.TASK_INSTANCE:
            return controls_paragraph(task_view_controls(), self.styles)
        return controls_paragraph(resource_view_controls(), self.styles)