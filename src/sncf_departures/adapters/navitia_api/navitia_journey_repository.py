"""Navitia journey repository adapter."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from pydantic import ValidationError

from sncf_departures.adapters.navitia_api.constants import JOURNEYS_PATH
from sncf_departures.adapters.navitia_api.http_client import (
    NavitiaHttpClient,
    NavitiaNoSolutionError,
)
from sncf_departures.adapters.navitia_api.parser import format_navitia_datetime, parse_journeys
from sncf_departures.adapters.navitia_api.payloads import NavitiaJourneysResponse
from sncf_departures.domain.errors import RemoteLookupError
from sncf_departures.domain.models.journey import Journey
from sncf_departures.domain.ports.journey_repository import JourneyRepository

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class NavitiaJourneyRepository(JourneyRepository):
    """Upcoming journeys through the Navitia ``journeys`` endpoint."""

    def __init__(
        self,
        http_client: NavitiaHttpClient,
        count: int = 10,
        now: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the repository.

        Args:
            http_client: Navitia HTTP client.
            count: Number of journeys requested per fetch.
            now: Source of the departure date-time sent with each request.
        """
        self._http_client = http_client
        self._count = count
        self._now = now

    async def fetch_journeys(self, origin_id: str, destination_id: str) -> list[Journey]:
        """Fetch journeys leaving from now on.

        The batch keeps the API order; it is not sorted here.
        """
        params = [
            ("from", origin_id),
            ("to", destination_id),
            ("datetime", format_navitia_datetime(self._now())),
            ("count", str(self._count)),
        ]
        try:
            data = await self._http_client.get_json(JOURNEYS_PATH, params)
        except NavitiaNoSolutionError as e:
            logger.info(f"No journey from {origin_id} to {destination_id}: {e}")
            return []

        try:
            response = NavitiaJourneysResponse.model_validate(data)
        except ValidationError as e:
            raise RemoteLookupError(f"Unexpected journeys response: {e}") from e
        journeys = parse_journeys(response.journeys)
        logger.debug(f"Fetched {len(journeys)} journey(s) {origin_id} -> {destination_id}")
        return journeys
