"""Per-turn countdown."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Optional

TURN_SECONDS = 15


class TurnTimer:
    """Counts whole seconds of a turn and signals when the turn time is up."""

    def __init__(self, duration: int = TURN_SECONDS,
                 clock: Callable[[], float] = time.monotonic) -> None:
        self.duration = duration
        self._clock = clock
        self._start: Optional[float] = None
        self.seconds = 0

    @property
    def label(self) -> str:
        """The elapsed seconds as two digits."""
        return f"{self.seconds:02d}"

    def tick(self) -> bool:
        """Update the elapsed seconds; return True, and restart, once the turn is over."""
        if self._start is None:
            self._start = self._clock()
        elapsed = int(self._clock() - self._start)
        if elapsed > self.seconds:
            self.seconds = elapsed
        if self.seconds >= self.duration:
            self.seconds = 0
            self._start = self._clock()
            return True
        return False

    def reset(self) -> None:
        """Start counting again from zero at the next tick."""
        self._start = None
        self.seconds = 0