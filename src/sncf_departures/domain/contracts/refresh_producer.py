"""Protocol for background journey refresh."""

from typing import Protocol


class RefreshProducerProtocol(Protocol):
    """Protocol for a task that keeps pushing fresh journey batches."""

    @property
    def is_running(self) -> bool:
        """Whether the background task is alive."""
        ...

    async def start(self) -> None:
        """Start the producer; a no-op while already running."""
        ...

    async def stop(self) -> None:
        """Stop the producer."""
        ...
