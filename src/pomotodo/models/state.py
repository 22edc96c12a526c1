"""Root state tree shared by the clock and the task list."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .clock import ClockState
from .task import TaskListState


class AppState(BaseModel):
    """Everything the presentation layer can observe."""

    clock: ClockState = Field(default_factory=ClockState)
    tasks: TaskListState = Field(default_factory=TaskListState)

    def snapshot(self) -> AppState:
        """Return a deep copy that is safe to hand to readers."""
        return self.model_copy(deep=True)
