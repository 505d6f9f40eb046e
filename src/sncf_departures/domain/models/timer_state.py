"""Countdown timer state."""

from dataclasses import dataclass
from datetime import timedelta

_ZERO = timedelta(0)


@dataclass
class TimerState:
    """Countdown towards the departure of the selected journey.

    ``start`` and ``zero_reached_at`` are monotonic clock readings in seconds.
    """

    start: float = 0.0
    duration: timedelta = timedelta(hours=1)
    notified: bool = False
    zero_reached_at: float | None = None

    def __post_init__(self) -> None:
        if self.duration < _ZERO:
            self.duration = _ZERO

    def remaining(self, elapsed: timedelta) -> timedelta:
        """Time left after ``elapsed``, clamped to zero."""
        if elapsed >= self.duration:
            return _ZERO
        return self.duration - elapsed

    def remaining_at(self, now: float) -> timedelta:
        """Time left at monotonic instant ``now``."""
        return self.remaining(timedelta(seconds=max(0.0, now - self.start)))

    def restart(self, now: float, duration: timedelta) -> None:
        """Count down ``duration`` from ``now``; negative durations become zero."""
        self.start = now
        self.duration = max(duration, _ZERO)

    def clear_alert(self) -> None:
        """Forget that the countdown reached zero."""
        self.notified = False
        self.zero_reached_at = None
