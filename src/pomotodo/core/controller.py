"""Root controller - the single writer of application state.

Holds the one :class:`AppState` tree, binds the clock engine and the task
list manager to their sub-trees, and forwards every intent to the engine
that owns it. After each mutation it hands a deep-copied snapshot to the
caller and to every subscribed listener.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pomotodo.models.state import AppState
from pomotodo.services.clock_service import ClockEngine
from pomotodo.services.task_service import TaskListManager

from .intents import Intent

logger = logging.getLogger(__name__)

Listener = Callable[[AppState], None]


class RootController:
    """Delegates intents to the clock engine and the task list manager."""

    def __init__(self, state: AppState | None = None):
        self.state = state if state is not None else AppState()
        self.clock = ClockEngine(self.state.clock)
        self.tasks = TaskListManager(self.state.tasks)
        self._listeners: list[Listener] = []

    # ---- observation ----

    def snapshot(self) -> AppState:
        return self.state.snapshot()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with a snapshot after every mutation.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self) -> AppState:
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)
        return snap

    # ---- clock intents ----

    def start(self) -> AppState:
        self.clock.start()
        return self._changed()

    def pause(self) -> AppState:
        self.clock.pause()
        return self._changed()

    def reset(self) -> AppState:
        self.clock.reset()
        return self._changed()

    def tick(self) -> AppState:
        self.clock.tick()
        return self._changed()

    # ---- task intents ----

    def add_task(self, text: str) -> AppState:
        self.tasks.add_task(text)
        return self._changed()

    def toggle_task(self, task_id: str) -> AppState:
        self.tasks.toggle_task(task_id)
        return self._changed()

    def delete_task(self, task_id: str) -> AppState:
        self.tasks.delete_task(task_id)
        return self._changed()

    def begin_edit(self, task_id: str, current_text: str) -> AppState:
        self.tasks.begin_edit(task_id, current_text)
        return self._changed()

    def change_edit_text(self, text: str) -> AppState:
        self.tasks.change_edit_text(text)
        return self._changed()

    def commit_edit(self, task_id: str | None = None) -> AppState:
        self.tasks.commit_edit(task_id)
        return self._changed()

    def cancel_edit(self) -> AppState:
        self.tasks.cancel_edit()
        return self._changed()

    # ---- named form ----

    def dispatch(self, intent: Intent) -> AppState:
        """Apply an :class:`Intent` ``intent.times`` times.

        ``begin_edit`` without text starts from the task's current text, the
        way a double-click on the task does.
        """
        logger.debug("dispatch %s x%s", intent.name, intent.times)
        snap = self.snapshot()
        for _ in range(intent.times):
            snap = self._apply(intent)
        return snap

    def _apply(self, intent: Intent) -> AppState:
        name = intent.name
        if name == "start":
            return self.start()
        if name == "pause":
            return self.pause()
        if name == "reset":
            return self.reset()
        if name == "tick":
            return self.tick()
        if name == "add_task":
            return self.add_task(intent.text or "")
        if name == "toggle_task":
            return self.toggle_task(intent.id or "")
        if name == "delete_task":
            return self.delete_task(intent.id or "")
        if name == "begin_edit":
            task_id = intent.id or ""
            text = intent.text
            if text is None:
                task = self.state.tasks.find(task_id)
                text = task.text if task else ""
            return self.begin_edit(task_id, text)
        if name == "change_edit_text":
            return self.change_edit_text(intent.text or "")
        if name == "commit_edit":
            return self.commit_edit(intent.id)
        if name == "cancel_edit":
            return self.cancel_edit()
        raise ValueError(f"Unhandled intent: {name}")
