"""Application services."""

from sncf_departures.application.services.error_details import describe_lookup_error
from sncf_departures.application.services.journey_channel import JourneyChannel
from sncf_departures.application.services.journey_refresh_producer import (
    JourneyRefreshProducer,
)
from sncf_departures.application.services.journey_selection import (
    MergeResult,
    countdown_to,
    merge_journeys,
)
from sncf_departures.application.services.search_controller import DebouncedSearchController

__all__ = [
    "DebouncedSearchController",
    "JourneyChannel",
    "JourneyRefreshProducer",
    "MergeResult",
    "countdown_to",
    "describe_lookup_error",
    "merge_journeys",
]
