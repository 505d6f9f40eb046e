"""Place repository port."""

from typing import Protocol

from sncf_departures.domain.models.place import Place


class PlaceRepository(Protocol):
    """Port for looking up stations by free text."""

    async def search_places(self, query: str) -> list[Place]:
        """Search stations matching a query.

        Raises:
            RemoteLookupError: If the lookup failed.
        """
        ...
