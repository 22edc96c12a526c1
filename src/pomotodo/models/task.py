"""Task list models."""

from __future__ import annotations

import uuid
from typing import Literal

from pydantic import BaseModel, Field

MIN_TASK_LENGTH = 3

ErrorKind = Literal["empty", "too_short"]

ERROR_MESSAGES: dict[str, str] = {
    "empty": "Task is required",
    "too_short": f"Task minimum length is {MIN_TASK_LENGTH}",
}


def new_task_id() -> str:
    """Generate an opaque unique task identifier."""
    return uuid.uuid4().hex


class Task(BaseModel):
    """A single entry of the task list."""

    id: str = Field(default_factory=new_task_id)
    text: str = Field(min_length=MIN_TASK_LENGTH)
    done: bool = False


class EditSession(BaseModel):
    """The rename in progress: which task and its unsaved draft."""

    target_task_id: str
    draft_text: str = ""


class TextValidationError(BaseModel):
    """Rejected task text, kept in state as a hint for the presentation layer."""

    kind: ErrorKind

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self.kind]

    def __str__(self) -> str:
        return self.message


class TaskListState(BaseModel):
    """Ordered tasks plus the single-slot edit session and form errors."""

    items: list[Task] = Field(default_factory=list)
    edit: EditSession | None = None
    add_error: TextValidationError | None = None
    edit_error: TextValidationError | None = None

    def find(self, task_id: str) -> Task | None:
        for task in self.items:
            if task.id == task_id:
                return task
        return None

    @property
    def editing_id(self) -> str | None:
        return self.edit.target_task_id if self.edit else None
