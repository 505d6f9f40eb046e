"""Real clock adapter."""

import time
from datetime import UTC, datetime


class SystemClock:
    """Clock backed by ``time.monotonic`` and the UTC wall clock."""

    def monotonic(self) -> float:
        return time.monotonic()

    def now(self) -> datetime:
        return datetime.now(UTC)
