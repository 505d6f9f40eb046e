"""Application state and session lifecycle."""

from __future__ import annotations

import logging
from datetime import timedelta
from enum import Enum
from typing import TYPE_CHECKING

from sncf_departures.application.services.journey_channel import (
    DEFAULT_CHANNEL_CAPACITY,
    JourneyChannel,
)
from sncf_departures.application.services.journey_refresh_producer import (
    DEFAULT_FETCH_TIMEOUT_SECONDS,
    DEFAULT_REFRESH_INTERVAL_SECONDS,
    JourneyRefreshProducer,
)
from sncf_departures.application.services.journey_selection import (
    clamp_index,
    countdown_to,
    merge_journeys,
)
from sncf_departures.application.services.search_controller import DebouncedSearchController
from sncf_departures.domain.errors import ConfigError
from sncf_departures.domain.models.input_state import InputState
from sncf_departures.domain.models.saved_route import SavedPlace, SavedRoute
from sncf_departures.domain.models.timer_state import TimerState

if TYPE_CHECKING:
    from sncf_departures.domain.contracts.clock import ClockProtocol
    from sncf_departures.domain.models.journey import Journey
    from sncf_departures.domain.models.place import Place
    from sncf_departures.domain.ports import (
        JourneyRepository,
        PlaceRepository,
        RouteConfigStore,
    )

logger = logging.getLogger(__name__)


class Mode(Enum):
    """What the user is currently doing."""

    INPUT_START = "input_start"
    INPUT_DEST = "input_dest"
    TIMER = "timer"


_INPUT_TITLES = {
    Mode.INPUT_START: "Start station",
    Mode.INPUT_DEST: "Destination station",
    Mode.TIMER: "",
}


class App:
    """Session object owning all UI state and the background refresh.

    Everything here is mutated from the UI loop only. The refresh task
    talks to the UI loop exclusively through ``channel``.
    """

    def __init__(
        self,
        place_repository: PlaceRepository,
        journey_repository: JourneyRepository,
        config_store: RouteConfigStore,
        clock: ClockProtocol,
        search_controller: DebouncedSearchController | None = None,
        refresh_interval_seconds: float = DEFAULT_REFRESH_INTERVAL_SECONDS,
        fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
        channel_capacity: int = DEFAULT_CHANNEL_CAPACITY,
    ) -> None:
        """Initialize the session from the saved route, if any.

        Args:
            place_repository: Port for station lookups.
            journey_repository: Port for journey lookups.
            config_store: Store holding the saved route.
            clock: Source of monotonic and wall-clock time.
            search_controller: Debounced search; built from the repository if omitted.
            refresh_interval_seconds: Sleep between two journey fetches.
            fetch_timeout_seconds: Upper bound for a single journey fetch.
            channel_capacity: Number of batches the channel buffers.
        """
        self.journey_repository = journey_repository
        self.config_store = config_store
        self.clock = clock
        self.search_controller = search_controller or DebouncedSearchController(
            place_repository, clock
        )
        self.refresh_interval_seconds = refresh_interval_seconds
        self.fetch_timeout_seconds = fetch_timeout_seconds
        self.channel_capacity = channel_capacity

        self.route: SavedRoute | None = config_store.load()
        self.mode = Mode.TIMER if self.route is not None else Mode.INPUT_START
        self.input = InputState(last_edit_at=clock.monotonic())
        self.timer = TimerState(start=clock.monotonic())
        self.chosen_start: Place | None = self.route.start.to_place() if self.route else None
        self.chosen_dest: Place | None = (
            self.route.destination.to_place() if self.route else None
        )
        self.journeys: list[Journey] = []
        self.journeys_selected = 0
        self.journeys_loading = True
        self.status_message: str | None = None

        self.channel: JourneyChannel | None = None
        self.producer: JourneyRefreshProducer | None = None

    @property
    def input_title(self) -> str:
        return _INPUT_TITLES[self.mode]

    @property
    def selected_journey(self) -> Journey | None:
        if not self.journeys:
            return None
        return self.journeys[clamp_index(self.journeys_selected, len(self.journeys))]

    # -- input -----------------------------------------------------------

    def type_text(self, text: str) -> None:
        """Insert typed characters at the cursor."""
        for char in text:
            self.input.insert(char, self.clock.monotonic())

    def delete_backward(self) -> None:
        self.input.backspace(self.clock.monotonic())

    async def confirm_selection(self) -> bool:
        """Confirm the highlighted suggestion for the station being entered.

        Confirming the destination saves the route and restarts the
        journey refresh for it.

        Returns:
            True if a station was confirmed.
        """
        place = self.input.selected_suggestion()
        if place is None or self.mode is Mode.TIMER:
            return False

        if self.mode is Mode.INPUT_START:
            self.chosen_start = place
            self.input.reset()
            logger.info(f"Start station selected: {place.name} ({place.id})")
            self.mode = Mode.INPUT_DEST
            return True

        self.chosen_dest = place
        self.input.reset()
        logger.info(f"Destination station selected: {place.name} ({place.id})")
        if self.chosen_start is None:
            self.mode = Mode.INPUT_START
            return True

        route = SavedRoute(
            start=SavedPlace.from_place(self.chosen_start),
            destination=SavedPlace.from_place(place),
        )
        try:
            self.config_store.save(route)
            self.status_message = None
        except ConfigError as e:
            logger.error(f"Failed to save route: {e}")
            self.status_message = f"Could not save route: {e}"
        self.route = route
        self.mode = Mode.TIMER
        await self.restart_refresh()
        return True

    async def begin_reconfigure(self) -> None:
        """Stop refreshing and go back to choosing the start station."""
        await self.stop()
        self.input.reset()
        self.mode = Mode.INPUT_START

    # -- journeys ----------------------------------------------------------

    def replace_journeys(self, batch: list[Journey]) -> None:
        """Show a freshly fetched batch, keeping the selected journey when possible."""
        result = merge_journeys(self.journeys, self.journeys_selected, batch)
        self.journeys = result.journeys
        self.journeys_selected = result.selected_index
        self.journeys_loading = False
        if result.selected is None:
            return
        self.update_timer_from_selection(reset_alert=result.target_changed)

    def update_timer_from_selection(self, reset_alert: bool = True) -> None:
        """Count down towards the departure of the selected journey."""
        journey = self.selected_journey
        if journey is None:
            return
        self.timer.restart(self.clock.monotonic(), countdown_to(journey, self.clock.now()))
        if reset_alert:
            self.timer.clear_alert()

    def select_next_journey(self) -> None:
        if self.journeys_selected + 1 < len(self.journeys):
            self.journeys_selected += 1
            self.update_timer_from_selection()

    def select_previous_journey(self) -> None:
        if self.journeys_selected > 0 and self.journeys:
            self.journeys_selected -= 1
            self.update_timer_from_selection()

    def remaining_time(self, elapsed: timedelta) -> timedelta:
        return self.timer.remaining(elapsed)

    def remaining_now(self) -> timedelta:
        return self.timer.remaining_at(self.clock.monotonic())

    # -- session lifecycle -------------------------------------------------

    async def start_refresh(self) -> None:
        """Start the background refresh for the active route, once."""
        if self.route is None:
            logger.info("No route configured, journey refresh not started")
            return
        if self.producer is not None and self.producer.is_running:
            return

        if self.channel is not None:
            self.channel.close()
        self.channel = JourneyChannel(self.channel_capacity)
        self.producer = JourneyRefreshProducer(
            journey_repository=self.journey_repository,
            origin_id=self.route.start.id,
            destination_id=self.route.destination.id,
            channel=self.channel,
            interval_seconds=self.refresh_interval_seconds,
            fetch_timeout_seconds=self.fetch_timeout_seconds,
        )
        self.journeys_loading = True
        await self.producer.start()

    async def restart_refresh(self) -> None:
        """Replace the refresh task so it picks up the current route."""
        await self.stop()
        self.journeys = []
        self.journeys_selected = 0
        await self.start_refresh()

    async def stop(self) -> None:
        """Stop the refresh task and drop the receiving end of its channel."""
        if self.producer is not None:
            await self.producer.stop()
            self.producer = None
        if self.channel is not None:
            self.channel.close()
            self.channel = None

    async def tick(self) -> None:
        """Run one UI refresh tick."""
        if self.mode in (Mode.INPUT_START, Mode.INPUT_DEST):
            await self.search_controller.maybe_fetch(self.input)
        elif self.route is not None:
            await self.start_refresh()

        if self.channel is not None:
            for batch in self.channel.drain():
                self.replace_journeys(batch)

        self._check_countdown()

    def _check_countdown(self) -> None:
        if self.selected_journey is None or self.timer.notified:
            return
        if self.remaining_now() == timedelta(0):
            self.timer.notified = True
            self.timer.zero_reached_at = self.clock.monotonic()
            journey = self.selected_journey
            logger.info(f"Departure time reached for journey at {journey.departure:%H:%M}")
