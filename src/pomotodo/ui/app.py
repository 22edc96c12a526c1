"""Textual TUI: focus/break timer above a renameable task list.

The app is a pure presentation layer. Every button, key and input is turned
into an intent on the :class:`RootController`; the screen is redrawn from the
snapshot the controller publishes afterwards. The app also owns the tick
schedule and keeps it in step with the clock's running flag.
"""

from __future__ import annotations

from textual import events, on
from textual.app import App, ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Button, Footer, Input, Static

from pomotodo.core.controller import RootController
from pomotodo.models.state import AppState
from pomotodo.models.task import Task
from pomotodo.ui.formatters import format_clock
from pomotodo.utils.ticker import TickScheduler


class TaskCheckbox(Static):
    """Clickable check mark that toggles its task."""

    app: "PomodoroApp"

    def __init__(self, task: Task):
        super().__init__("☑" if task.done else "☐", classes="task-checkbox")
        self.task_id = task.id

    def on_click(self, event: events.Click) -> None:
        self.app.controller.toggle_task(self.task_id)
        event.stop()


class TaskLabel(Static):
    """Task text; a double click starts renaming it."""

    app: "PomodoroApp"

    def __init__(self, task: Task):
        super().__init__(task.text, markup=False, classes="task-label")
        self.task_id = task.id
        self.task_text = task.text
        if task.done:
            self.add_class("done")

    def on_click(self, event: events.Click) -> None:
        if event.chain == 2:
            self.app.controller.begin_edit(self.task_id, self.task_text)
            event.stop()


class EditInput(Input):
    """Inline rename field. Enter saves, Escape cancels, leaving the field saves."""

    app: "PomodoroApp"

    BINDINGS = [("escape", "cancel_edit", "Cancel rename")]

    def __init__(self, task_id: str, draft: str):
        super().__init__(value=draft, classes="edit-input")
        self.task_id = task_id

    def action_cancel_edit(self) -> None:
        self.app.controller.cancel_edit()

    def on_blur(self, event: events.Blur) -> None:
        self.app.controller.commit_edit(self.task_id)


class TaskRow(Horizontal):
    """One line of the task list."""

    app: "PomodoroApp"

    can_focus = True

    BINDINGS = [
        ("space", "toggle", "Toggle"),
        ("e", "edit", "Rename"),
        ("delete", "delete", "Delete"),
    ]

    def __init__(self, task: Task, draft: str | None = None):
        super().__init__(classes="task-row")
        self.model = task
        self.draft = draft

    def compose(self) -> ComposeResult:
        yield TaskCheckbox(self.model)
        if self.draft is not None:
            yield EditInput(self.model.id, self.draft)
        else:
            yield TaskLabel(self.model)
        yield Button("Delete", variant="error", classes="delete-button")

    def on_mount(self) -> None:
        if self.draft is not None:
            self.query_one(EditInput).focus()

    @on(Button.Pressed, ".delete-button")
    def _delete_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.action_delete()

    def action_toggle(self) -> None:
        self.app.controller.toggle_task(self.model.id)

    def action_edit(self) -> None:
        self.app.controller.begin_edit(self.model.id, self.model.text)

    def action_delete(self) -> None:
        self.app.controller.delete_task(self.model.id)


class PomodoroApp(App):
    """A Textual app combining the Pomodoro clock and the task list."""

    TITLE = "Pomotodo"

    CSS = """
    Screen {
        align-horizontal: center;
        padding: 1 2;
    }

    .heading {
        text-style: bold;
        margin: 1 0 0 0;
    }

    #phase {
        text-style: bold;
    }

    #phase.break {
        color: #a7f3d0;
    }

    #clock {
        text-style: bold;
        padding: 0 2;
        width: auto;
        border: round $accent;
    }

    #clock-buttons, #add-form {
        height: auto;
        margin: 1 0;
    }

    #new-task {
        width: 1fr;
    }

    .error {
        color: $error;
        height: auto;
    }

    #task-list {
        height: 1fr;
    }

    .task-row {
        height: auto;
        padding: 0 1;
    }

    .task-row:focus {
        background: $boost;
    }

    .task-checkbox {
        width: 3;
        padding: 1 0;
    }

    .task-label {
        width: 1fr;
        padding: 1 1;
    }

    .task-label.done {
        color: $text-muted;
        text-style: strike;
    }

    .edit-input {
        width: 1fr;
    }
    """

    BINDINGS = [
        ("s", "start", "Start"),
        ("p", "pause", "Pause"),
        ("r", "reset", "Reset"),
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        controller: RootController | None = None,
        *,
        theme_name: str = "dark",
        tick_interval: float = 1.0,
    ):
        super().__init__()
        self.controller = controller or RootController()
        self.theme_name = theme_name
        self.ticker = TickScheduler(self.controller.tick, interval=tick_interval)
        self._unsubscribe = None
        self._rendered_tasks: tuple | None = None

    def compose(self) -> ComposeResult:
        yield Static("Pomodoro Timer", classes="heading")
        yield Static(id="phase")
        yield Static(id="clock")
        with Horizontal(id="clock-buttons"):
            yield Button("Start", id="start", variant="primary")
            yield Button("Pause", id="pause")
            yield Button("Reset", id="reset", variant="error")
        yield Static("My Tasks", classes="heading")
        with Horizontal(id="add-form"):
            yield Input(placeholder="Add a new task...", id="new-task")
            yield Button("Add", id="add", variant="primary")
        yield Static(id="add-error", classes="error")
        yield VerticalScroll(id="task-list")
        yield Static(id="edit-error", classes="error")
        yield Footer()

    def on_mount(self) -> None:
        if self.theme_name == "light":
            self.theme = "textual-light"
        self._unsubscribe = self.controller.subscribe(self.render_state)
        self._draw(self.controller.snapshot())

    async def action_quit(self) -> None:
        self._stop_ticking()
        self.exit()

    async def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        await self.ticker.close()

    def _stop_ticking(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.ticker.cancel()

    # ---- rendering ----

    def render_state(self, state: AppState) -> None:
        """Redraw from a snapshot and keep the tick schedule in step.

        Once shutdown has begun the widgets may already be gone, so the
        schedule is dropped instead of redrawing.
        """
        if not self.is_running:
            self._stop_ticking()
            return
        self._draw(state)

    def _draw(self, state: AppState) -> None:
        self.ticker.sync(state.clock.running)

        clock = state.clock
        phase = self.query_one("#phase", Static)
        phase.update(clock.title)
        phase.set_class(clock.phase == "break", "break")
        self.query_one("#clock", Static).update(format_clock(clock))

        tasks = state.tasks
        add_error = tasks.add_error.message if tasks.add_error else ""
        edit_error = tasks.edit_error.message if tasks.edit_error else ""
        self.query_one("#add-error", Static).update(add_error)
        self.query_one("#edit-error", Static).update(edit_error)

        # draft keystrokes must not rebuild the list, the input would lose focus
        key = (tuple(tasks.items), tasks.editing_id)
        if key == self._rendered_tasks:
            return
        self._rendered_tasks = key

        task_list = self.query_one("#task-list", VerticalScroll)
        task_list.remove_children()
        rows = []
        for task in tasks.items:
            draft = tasks.edit.draft_text if task.id == tasks.editing_id else None
            rows.append(TaskRow(task, draft))
        task_list.mount_all(rows)

    # ---- clock ----

    def action_start(self) -> None:
        self.controller.start()

    def action_pause(self) -> None:
        self.controller.pause()

    def action_reset(self) -> None:
        self.controller.reset()

    @on(Button.Pressed, "#start")
    def _start_pressed(self) -> None:
        self.action_start()

    @on(Button.Pressed, "#pause")
    def _pause_pressed(self) -> None:
        self.action_pause()

    @on(Button.Pressed, "#reset")
    def _reset_pressed(self) -> None:
        self.action_reset()

    # ---- add form ----

    @on(Input.Submitted, "#new-task")
    @on(Button.Pressed, "#add")
    def _add_submitted(self) -> None:
        field = self.query_one("#new-task", Input)
        state = self.controller.add_task(field.value)
        if state.tasks.add_error is None:
            field.value = ""

    # ---- rename ----

    @on(Input.Changed, ".edit-input")
    def _draft_changed(self, event: Input.Changed) -> None:
        self.controller.change_edit_text(event.value)

    @on(Input.Submitted, ".edit-input")
    def _draft_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.controller.commit_edit(event.input.task_id)
