"""Services module for pomotodo - Business logic layer."""

from .clock_service import ClockEngine
from .config_service import ConfigService, get_config_service
from .task_service import TaskListManager, validate_task_text

__all__ = [
    "ClockEngine",
    "TaskListManager",
    "validate_task_text",
    "ConfigService",
    "get_config_service",
]
