"""Ports (interfaces) for the ports-and-adapters architecture."""

from sncf_departures.domain.ports.journey_repository import JourneyRepository
from sncf_departures.domain.ports.place_repository import PlaceRepository
from sncf_departures.domain.ports.route_config_store import RouteConfigStore

__all__ = [
    "JourneyRepository",
    "PlaceRepository",
    "RouteConfigStore",
]
