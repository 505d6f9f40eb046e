"""Adapters layer - external system integrations."""

from sncf_departures.adapters.config import AppConfig, TomlRouteConfigStore
from sncf_departures.adapters.navitia_api import (
    NavitiaHttpClient,
    NavitiaJourneyRepository,
    NavitiaPlaceRepository,
)
from sncf_departures.adapters.system_clock import SystemClock

__all__ = [
    "AppConfig",
    "NavitiaHttpClient",
    "NavitiaJourneyRepository",
    "NavitiaPlaceRepository",
    "SystemClock",
    "TomlRouteConfigStore",
]
