"""Domain models for SNCF departures."""

from sncf_departures.domain.models.error_details import ErrorDetails
from sncf_departures.domain.models.input_state import MIN_QUERY_LEN, InputState
from sncf_departures.domain.models.journey import Journey, JourneyKey
from sncf_departures.domain.models.place import Place
from sncf_departures.domain.models.saved_route import SavedPlace, SavedRoute
from sncf_departures.domain.models.timer_state import TimerState

__all__ = [
    "MIN_QUERY_LEN",
    "ErrorDetails",
    "InputState",
    "Journey",
    "JourneyKey",
    "Place",
    "SavedPlace",
    "SavedRoute",
    "TimerState",
]
