"""Domain layer - core business logic and models."""

from sncf_departures.domain.models import (
    InputState,
    Journey,
    JourneyKey,
    Place,
    SavedRoute,
    TimerState,
)
from sncf_departures.domain.ports import (
    JourneyRepository,
    PlaceRepository,
    RouteConfigStore,
)

__all__ = [
    "InputState",
    "Journey",
    "JourneyKey",
    "JourneyRepository",
    "Place",
    "PlaceRepository",
    "RouteConfigStore",
    "SavedRoute",
    "TimerState",
]
