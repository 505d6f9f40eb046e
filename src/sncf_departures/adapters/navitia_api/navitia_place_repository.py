"""Navitia place repository adapter."""

import logging

from pydantic import ValidationError

from sncf_departures.adapters.navitia_api.constants import PLACES_PATH
from sncf_departures.adapters.navitia_api.http_client import NavitiaHttpClient
from sncf_departures.adapters.navitia_api.parser import parse_places
from sncf_departures.adapters.navitia_api.payloads import NavitiaPlacesResponse
from sncf_departures.domain.errors import RemoteLookupError
from sncf_departures.domain.models.place import Place
from sncf_departures.domain.ports.place_repository import PlaceRepository

logger = logging.getLogger(__name__)


class NavitiaPlaceRepository(PlaceRepository):
    """Station search through the Navitia ``places`` endpoint."""

    def __init__(self, http_client: NavitiaHttpClient) -> None:
        self._http_client = http_client

    async def search_places(self, query: str) -> list[Place]:
        """Search stop areas matching ``query``.

        Args:
            query: Free text typed by the user.

        Returns:
            Matching places in the order ranked by the API.
        """
        params = [("q", query), ("type[]", "stop_area")]
        data = await self._http_client.get_json(PLACES_PATH, params)
        try:
            response = NavitiaPlacesResponse.model_validate(data)
        except ValidationError as e:
            raise RemoteLookupError(f"Unexpected places response: {e}") from e
        places = parse_places(response.places)
        logger.debug(f"Found {len(places)} place(s) for {query!r}")
        return places
