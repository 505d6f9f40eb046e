"""Application layer - session state and services."""

from sncf_departures.application.app import App, Mode

__all__ = ["App", "Mode"]
