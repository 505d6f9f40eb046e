"""SNCF (Navitia) API adapters."""

from sncf_departures.adapters.navitia_api.http_client import (
    NavitiaHttpClient,
    NavitiaNoSolutionError,
)
from sncf_departures.adapters.navitia_api.navitia_journey_repository import (
    NavitiaJourneyRepository,
)
from sncf_departures.adapters.navitia_api.navitia_place_repository import NavitiaPlaceRepository

__all__ = [
    "NavitiaHttpClient",
    "NavitiaJourneyRepository",
    "NavitiaNoSolutionError",
    "NavitiaPlaceRepository",
]
