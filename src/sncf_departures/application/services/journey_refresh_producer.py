"""Background task that keeps the journey list fresh."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from sncf_departures.application.services.error_details import describe_lookup_error
from sncf_departures.domain.contracts.refresh_producer import RefreshProducerProtocol
from sncf_departures.domain.errors import ChannelClosedError

if TYPE_CHECKING:
    from sncf_departures.application.services.journey_channel import JourneyChannel
    from sncf_departures.domain.models.journey import Journey
    from sncf_departures.domain.ports import JourneyRepository

logger = logging.getLogger(__name__)

DEFAULT_REFRESH_INTERVAL_SECONDS = 30.0
DEFAULT_FETCH_TIMEOUT_SECONDS = 10.0


class JourneyRefreshProducer(RefreshProducerProtocol):
    """Polls journeys between two fixed places and pushes each batch into a channel.

    The origin and destination are captured when the producer is built; a
    route change needs a new producer. A failed fetch is logged and the loop
    keeps polling, so the consumer keeps showing the last batch. The loop ends
    when the channel receiver is closed or the task is cancelled.
    """

    def __init__(
        self,
        journey_repository: JourneyRepository,
        origin_id: str,
        destination_id: str,
        channel: JourneyChannel,
        interval_seconds: float = DEFAULT_REFRESH_INTERVAL_SECONDS,
        fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the producer.

        Args:
            journey_repository: Port used to fetch journeys.
            origin_id: Place id of the departure station.
            destination_id: Place id of the arrival station.
            channel: Channel the batches are pushed into.
            interval_seconds: Sleep between two fetches.
            fetch_timeout_seconds: Upper bound for a single fetch.
        """
        self.journey_repository = journey_repository
        self.origin_id = origin_id
        self.destination_id = destination_id
        self.channel = channel
        self.interval_seconds = interval_seconds
        self.fetch_timeout_seconds = fetch_timeout_seconds
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start the refresh task."""
        if self.is_running:
            logger.warning("Journey refresh already running")
            return

        self._task = asyncio.create_task(self._poll_loop())
        logger.info(
            f"Started journey refresh {self.origin_id} -> {self.destination_id} "
            f"(every {self.interval_seconds}s)"
        )

    async def stop(self) -> None:
        """Stop the refresh task."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info("Journey refresh cancelled")
            logger.info("Stopped journey refresh")

    async def _poll_loop(self) -> None:
        """Main polling loop."""
        try:
            while True:
                if not await self._refresh_once():
                    break
                await asyncio.sleep(self.interval_seconds)
        except asyncio.CancelledError:
            logger.info("Journey refresh cancelled")
            raise
        logger.info("Journey refresh terminated: consumer is gone")

    async def _fetch(self) -> list[Journey] | None:
        """Fetch one batch, or None when the fetch failed."""
        try:
            async with asyncio.timeout(self.fetch_timeout_seconds):
                return await self.journey_repository.fetch_journeys(
                    self.origin_id, self.destination_id
                )
        except Exception as e:
            # Keep polling; the consumer keeps the previous batch on screen
            details = describe_lookup_error(e)
            logger.error(
                f"Journey refresh failed for {self.origin_id} -> {self.destination_id}: "
                f"{details.reason} (status: {details.status_code}, error: {e!r}), "
                f"retrying in {self.interval_seconds}s"
            )
            if details.status_code == 429:
                logger.warning("Rate limit (429) detected - consider a longer refresh interval")
            return None

    async def _refresh_once(self) -> bool:
        """Fetch and push one batch.

        Returns:
            False once the channel receiver is gone, True otherwise.
        """
        journeys = await self._fetch()
        if journeys is None:
            return True

        try:
            await self.channel.send(journeys)
        except ChannelClosedError:
            return False
        logger.debug(f"Pushed {len(journeys)} journey(s) to the channel")
        return True
