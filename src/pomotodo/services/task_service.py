"""Task list manager - business rules for the task list and rename sessions.

Rejected input never raises. It is recorded on the state as a
:class:`TextValidationError` (``add_error`` for the add form, ``edit_error``
for the open rename) and the previous valid state is kept.
"""

from __future__ import annotations

import logging

from pomotodo.models.task import (
    MIN_TASK_LENGTH,
    EditSession,
    Task,
    TaskListState,
    TextValidationError,
)

logger = logging.getLogger(__name__)


def validate_task_text(text: str) -> tuple[str | None, TextValidationError | None]:
    """Check task text for both adding and renaming.

    Returns ``(trimmed_text, None)`` on success, ``(None, error)`` otherwise.
    """
    trimmed = (text or "").strip()
    if not trimmed:
        return None, TextValidationError(kind="empty")
    if len(trimmed) < MIN_TASK_LENGTH:
        return None, TextValidationError(kind="too_short")
    return trimmed, None


class TaskListManager:
    """Service for task list business logic.

    Operates on a :class:`TaskListState` owned by the caller. At most one
    rename session exists at any time; that rule is enforced here rather than
    left to the caller.
    """

    def __init__(self, state: TaskListState):
        """Initialize the manager.

        Args:
            state: Task list sub-tree of the application state
        """
        self.state = state

    # ---- collection ----

    def add_task(self, raw_text: str) -> Task | None:
        """Append a new open task.

        Args:
            raw_text: Text as typed; surrounding whitespace is dropped

        Returns:
            The created task, or None when the text was rejected
        """
        text, error = validate_task_text(raw_text)
        if error is not None:
            self.state.add_error = error
            logger.info("add rejected: %s", error.kind)
            return None

        task = Task(text=text)
        self.state.items.append(task)
        self.state.add_error = None
        logger.debug("task added id=%s", task.id)
        return task

    def toggle_task(self, task_id: str) -> None:
        """Flip the done flag. Unknown ids are ignored."""
        task = self.state.find(task_id)
        if task is None:
            logger.debug("toggle ignored, no task id=%s", task_id)
            return
        task.done = not task.done

    def delete_task(self, task_id: str) -> None:
        """Remove a task, closing the rename session if it targets that task."""
        if self.state.editing_id == task_id:
            self.cancel_edit()

        before = len(self.state.items)
        self.state.items = [t for t in self.state.items if t.id != task_id]
        if len(self.state.items) == before:
            logger.debug("delete ignored, no task id=%s", task_id)
        else:
            logger.debug("task deleted id=%s", task_id)

    # ---- rename session ----

    def begin_edit(self, task_id: str, current_text: str) -> None:
        """Open a rename session, discarding any other one without saving."""
        if self.state.find(task_id) is None:
            logger.debug("begin_edit ignored, no task id=%s", task_id)
            return

        previous = self.state.editing_id
        if previous is not None and previous != task_id:
            logger.debug("discarding unsaved edit of id=%s", previous)

        self.state.edit = EditSession(target_task_id=task_id, draft_text=current_text)
        self.state.edit_error = None

    def change_edit_text(self, text: str) -> None:
        """Replace the draft of the open session. No-op without a session."""
        if self.state.edit is None:
            return
        self.state.edit.draft_text = text

    def commit_edit(self, task_id: str | None = None) -> Task | None:
        """Save the draft into the target task.

        Args:
            task_id: When given, must match the session target

        Returns:
            The renamed task, or None when nothing was written. A rejected
            draft leaves the session open with ``edit_error`` set.
        """
        session = self.state.edit
        if session is None:
            return None
        if task_id is not None and task_id != session.target_task_id:
            logger.debug(
                "commit ignored, id=%s is not being edited (editing %s)",
                task_id,
                session.target_task_id,
            )
            return None

        text, error = validate_task_text(session.draft_text)
        if error is not None:
            self.state.edit_error = error
            logger.info("rename rejected: %s", error.kind)
            return None

        task = self.state.find(session.target_task_id)
        self._close_session()
        if task is None:
            return None
        task.text = text
        logger.debug("task renamed id=%s", task.id)
        return task

    def cancel_edit(self) -> None:
        """Drop the session and its error without validation."""
        self._close_session()

    def _close_session(self) -> None:
        self.state.edit = None
        self.state.edit_error = None
