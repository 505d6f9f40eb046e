"""Route configuration store port."""

from typing import Protocol

from sncf_departures.domain.models.saved_route import SavedRoute


class RouteConfigStore(Protocol):
    """Port for persisting the chosen origin and destination."""

    def load(self) -> SavedRoute | None:
        """Load the saved route, or None when absent or unreadable."""
        ...

    def save(self, route: SavedRoute) -> None:
        """Persist the route.

        Raises:
            ConfigError: If the route could not be written.
        """
        ...
