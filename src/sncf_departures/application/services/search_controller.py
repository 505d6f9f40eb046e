"""Debounced station search."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sncf_departures.domain.errors import RemoteLookupError
from sncf_departures.domain.models.input_state import MIN_QUERY_LEN

if TYPE_CHECKING:
    from sncf_departures.domain.contracts.clock import ClockProtocol
    from sncf_departures.domain.models.input_state import InputState
    from sncf_departures.domain.ports import PlaceRepository

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.35


class DebouncedSearchController:
    """Decides on each UI tick whether the typed query deserves a remote lookup.

    A lookup is issued only when the text is long enough, differs from the
    last successfully served query, and has not been edited for the debounce
    interval. At most one lookup is in flight per controller.
    """

    def __init__(
        self,
        place_repository: PlaceRepository,
        clock: ClockProtocol,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        min_query_len: int = MIN_QUERY_LEN,
    ) -> None:
        """Initialize the controller.

        Args:
            place_repository: Port used for station lookups.
            clock: Source of monotonic time for the debounce check.
            debounce_seconds: Quiet period required after the last edit.
            min_query_len: Shortest query that triggers a lookup.
        """
        self.place_repository = place_repository
        self.clock = clock
        self.debounce_seconds = debounce_seconds
        self.min_query_len = min_query_len
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def should_fetch(self, state: InputState) -> bool:
        """Check whether the current text qualifies for a lookup now."""
        if self._in_flight:
            return False
        if len(state.text) < self.min_query_len:
            return False
        if state.text == state.last_queried:
            return False
        return self.clock.monotonic() - state.last_edit_at >= self.debounce_seconds

    async def maybe_fetch(self, state: InputState) -> bool:
        """Run a lookup if the query qualifies and apply its outcome to ``state``.

        Returns:
            True if a lookup was attempted.
        """
        if not self.should_fetch(state):
            return False

        query = state.text
        self._in_flight = True
        state.loading = True
        state.error = None
        try:
            places = await self.place_repository.search_places(query)
        except RemoteLookupError as e:
            logger.warning(f"Station lookup for {query!r} failed: {e}")
            state.error = str(e)
        else:
            logger.debug(f"Station lookup for {query!r} returned {len(places)} place(s)")
            state.suggestions = places
            state.selected = 0
            state.error = None
            # The issued query, not state.text: edits made during the call must re-trigger
            state.last_queried = query
        finally:
            state.loading = False
            self._in_flight = False
        return True
