"""TOML file store for the saved route."""

import logging
import tomllib
from pathlib import Path

import tomli_w
from pydantic import ValidationError

from sncf_departures.domain.errors import ConfigError
from sncf_departures.domain.models.saved_route import SavedRoute
from sncf_departures.domain.ports.route_config_store import RouteConfigStore

logger = logging.getLogger(__name__)


class TomlRouteConfigStore(RouteConfigStore):
    """Reads and writes the saved route as a TOML document.

    Layout::

        [start]
        id = "stop_area:SNCF:87747006"
        name = "Grenoble"

        [destination]
        id = "stop_area:SNCF:87723197"
        name = "Lyon Part Dieu"
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read(self) -> SavedRoute:
        """Load the route, raising on any problem.

        Raises:
            ConfigError: If the file is missing, unreadable or invalid.
        """
        try:
            with open(self.path, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"Route file not found: {self.path}") from e
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Cannot read route file {self.path}: {e}") from e

        try:
            return SavedRoute.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid route file {self.path}: {e}") from e

    def load(self) -> SavedRoute | None:
        """Load the route, or None when there is no usable saved route."""
        if not self.path.exists():
            logger.info(f"No saved route at {self.path}")
            return None
        try:
            route = self.read()
        except ConfigError as e:
            logger.warning(f"Ignoring saved route: {e}")
            return None
        logger.info(f"Loaded route {route.start.name} -> {route.destination.name}")
        return route

    def save(self, route: SavedRoute) -> None:
        """Write the route, replacing any previous one.

        Raises:
            ConfigError: If the file cannot be written.
        """
        try:
            if self.path.parent != Path():
                self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "wb") as f:
                tomli_w.dump(route.model_dump(), f)
        except OSError as e:
            raise ConfigError(f"Cannot write route file {self.path}: {e}") from e
        logger.info(f"Saved route {route.start.name} -> {route.destination.name} to {self.path}")
