"""Per-turn search time budgeting."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable


@dataclass
class Timer:
    """Tracks the time a search may spend on one turn.

    Clock times and increments are in milliseconds; ``clock`` returns
    nanoseconds from a monotonic source.
    """

    players_time: int = 0
    players_increment: int = 0
    clock: Callable[[], int] = field(default=time.monotonic_ns, repr=False)
    _start_ns: int | None = field(default=None, init=False, repr=False)
    _end_ns: int | None = field(default=None, init=False, repr=False)

    def set_fields(self, time: int, increment: int) -> None:
        """Set the remaining clock time and the increment, in milliseconds."""
        if time < 0 or increment < 0:
            raise ValueError("time and increment must be non-negative")
        self.players_time = time
        self.players_increment = increment

    def time_allowance(self) -> int:
        """Milliseconds allowed for this turn: a twentieth of the clock plus half the increment."""
        return self.players_time // 20 + self.players_increment // 2

    def start(self) -> None:
        """Begin timing the current turn."""
        self._start_ns = self.clock()
        self._end_ns = self._start_ns + self.time_allowance() * 1_000_000

    def _require_started(self) -> tuple[int, int]:
        if self._start_ns is None or self._end_ns is None:
            raise RuntimeError("timer has not been started")
        return self._start_ns, self._end_ns

    def turn_duration(self) -> int:
        """Length of the turn's budget in microseconds."""
        start, end = self._require_started()
        return (end - start) // 1_000

    def is_out_of_time(self) -> bool:
        """True once the clock has passed the end of the turn's budget."""
        _, end = self._require_started()
        return self.clock() > end