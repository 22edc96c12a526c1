"""Countdown clock state models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

Phase = Literal["focus", "break"]

FOCUS_SECONDS = 25 * 60
BREAK_SECONDS = 5 * 60

PHASE_DURATIONS: dict[str, int] = {
    "focus": FOCUS_SECONDS,
    "break": BREAK_SECONDS,
}

PHASE_TITLES: dict[str, str] = {
    "focus": "Focus Time",
    "break": "Break Time",
}


def phase_duration(phase: Phase) -> int:
    """Return the fixed countdown length of a phase, in seconds."""
    return PHASE_DURATIONS[phase]


def other_phase(phase: Phase) -> Phase:
    """Return the phase that follows *phase*."""
    return "break" if phase == "focus" else "focus"


class ClockState(BaseModel):
    """Phase, remaining time and run status of the countdown clock.

    Remaining time is kept as one integer of seconds; minutes and seconds
    are derived views. Assignments are validated, so the engine must move
    ``phase`` before ``remaining_seconds`` when growing the countdown.
    """

    model_config = ConfigDict(validate_assignment=True)

    phase: Phase = "focus"
    remaining_seconds: int = Field(default=FOCUS_SECONDS, ge=0)
    running: bool = False

    @model_validator(mode="after")
    def _check_remaining_within_phase(self) -> ClockState:
        limit = phase_duration(self.phase)
        if self.remaining_seconds > limit:
            raise ValueError(
                f"remaining_seconds={self.remaining_seconds} exceeds "
                f"{self.phase} duration {limit}"
            )
        return self

    @property
    def minutes(self) -> int:
        return self.remaining_seconds // 60

    @property
    def seconds(self) -> int:
        return self.remaining_seconds % 60

    @property
    def title(self) -> str:
        """Human-readable phase title ("Focus Time" / "Break Time")."""
        return PHASE_TITLES[self.phase]
