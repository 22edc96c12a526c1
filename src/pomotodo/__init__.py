"""Pomotodo - a focus/break Pomodoro timer with a small task list."""

__version__ = "0.1.0"
