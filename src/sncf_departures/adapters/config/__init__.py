"""Configuration adapters."""

from sncf_departures.adapters.config.app_config import AppConfig
from sncf_departures.adapters.config.route_config_store import TomlRouteConfigStore

__all__ = ["AppConfig", "TomlRouteConfigStore"]
