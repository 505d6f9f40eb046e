"""Protocol for reading time."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime


class ClockProtocol(Protocol):
    """Source of elapsed time and wall-clock time."""

    def monotonic(self) -> float:
        """Monotonic reading in seconds, for measuring elapsed time."""
        ...

    def now(self) -> "datetime":
        """Current timezone-aware wall-clock time."""
        ...
