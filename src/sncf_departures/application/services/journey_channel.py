"""Bounded channel carrying journey batches from the refresh task to the UI loop."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from sncf_departures.domain.errors import ChannelClosedError

if TYPE_CHECKING:
    from sncf_departures.domain.models.journey import Journey

DEFAULT_CHANNEL_CAPACITY = 5


class JourneyChannel:
    """FIFO channel of journey batches with backpressure.

    ``send`` waits while the channel is full and fails with
    ``ChannelClosedError`` once the receiver has closed it. Batches are
    never dropped or merged while the channel is open.
    """

    def __init__(self, capacity: int = DEFAULT_CHANNEL_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._queue: asyncio.Queue[list[Journey]] = asyncio.Queue(maxsize=capacity)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def capacity(self) -> int:
        return self._queue.maxsize

    def pending(self) -> int:
        """Number of batches waiting to be received."""
        return self._queue.qsize()

    async def send(self, batch: list[Journey]) -> None:
        """Push a batch, waiting for room if the receiver lags behind."""
        if self._closed:
            raise ChannelClosedError("journey channel receiver is closed")
        await self._queue.put(batch)
        # close() may have freed the slot this put was waiting for
        if self._closed:
            raise ChannelClosedError("journey channel receiver is closed")

    def drain(self) -> list[list[Journey]]:
        """Receive every pending batch without waiting, oldest first."""
        batches: list[list[Journey]] = []
        while True:
            try:
                batches.append(self._queue.get_nowait())
            except asyncio.QueueEmpty:
                return batches

    def close(self) -> None:
        """Drop the receiver; pending batches are discarded and senders fail."""
        self._closed = True
        # Emptying the queue wakes any sender blocked on a full channel
        self.drain()
