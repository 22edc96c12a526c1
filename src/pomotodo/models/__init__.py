"""Pomotodo domain models.

Pydantic models for the clock, the task list and the root state tree, plus
the configuration models.
"""

from .clock import (
    BREAK_SECONDS,
    FOCUS_SECONDS,
    ClockState,
    Phase,
    other_phase,
    phase_duration,
)
from .config_models import AppConfig
from .state import AppState
from .task import (
    ERROR_MESSAGES,
    MIN_TASK_LENGTH,
    EditSession,
    Task,
    TaskListState,
    TextValidationError,
)

__all__ = [
    # Clock
    "BREAK_SECONDS",
    "FOCUS_SECONDS",
    "ClockState",
    "Phase",
    "other_phase",
    "phase_duration",
    # Tasks
    "ERROR_MESSAGES",
    "MIN_TASK_LENGTH",
    "EditSession",
    "Task",
    "TaskListState",
    "TextValidationError",
    # Root
    "AppState",
    "AppConfig",
]
