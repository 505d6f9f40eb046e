"""Journey repository port."""

from typing import Protocol

from sncf_departures.domain.models.journey import Journey


class JourneyRepository(Protocol):
    """Port for retrieving upcoming journeys between two places."""

    async def fetch_journeys(self, origin_id: str, destination_id: str) -> list[Journey]:
        """Get upcoming journeys from origin to destination.

        Raises:
            RemoteLookupError: If the lookup failed.
        """
        ...
