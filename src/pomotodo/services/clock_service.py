"""Clock engine - focus/break countdown transitions.

The engine is synchronous and knows nothing about wall-clock time. Whoever
presents the clock owns the once-per-second scheduling (see
``pomotodo.utils.ticker``) and calls :meth:`ClockEngine.tick`.
"""

from __future__ import annotations

import logging

from pomotodo.models.clock import (
    FOCUS_SECONDS,
    ClockState,
    other_phase,
    phase_duration,
)

logger = logging.getLogger(__name__)


class ClockEngine:
    """Mutates a :class:`ClockState` in place.

    The state object is owned by the caller (normally the root controller);
    the engine only holds a reference to it.
    """

    def __init__(self, state: ClockState):
        self.state = state

    def start(self) -> None:
        """Set the clock running. No-op if already running."""
        if self.state.running:
            return
        self.state.running = True
        logger.debug(
            "clock started phase=%s remaining=%s",
            self.state.phase,
            self.state.remaining_seconds,
        )

    def pause(self) -> None:
        """Stop the clock. No-op if already paused."""
        if not self.state.running:
            return
        self.state.running = False
        logger.debug(
            "clock paused phase=%s remaining=%s",
            self.state.phase,
            self.state.remaining_seconds,
        )

    def reset(self) -> None:
        """Return to a paused, full focus countdown whatever the current phase."""
        self.state.running = False
        self.state.phase = "focus"
        self.state.remaining_seconds = FOCUS_SECONDS
        logger.debug("clock reset")

    def tick(self) -> bool:
        """Advance the clock by one second.

        Returns True when the tick switched phase. The switch is detected
        lazily: the old phase sits at 00:00 for one full tick and flips on the
        next one.

        Note: the extra second at 00:00 may be a latent defect rather than a
        wanted feature. It is kept on purpose, so a focus phase lasts 1501
        ticks and a break 301.
        """
        state = self.state
        if not state.running:
            return False

        if state.remaining_seconds > 0:
            state.remaining_seconds -= 1
            return False

        # phase first: remaining_seconds is validated against it
        state.phase = other_phase(state.phase)
        state.remaining_seconds = phase_duration(state.phase)
        logger.info("phase switched to %s (%ss)", state.phase, state.remaining_seconds)
        return True
