"""Domain exceptions."""


class RemoteLookupError(Exception):
    """A remote station or journey lookup failed (network, HTTP status or decoding)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ConfigError(Exception):
    """The saved route could not be read or written."""


class ChannelClosedError(Exception):
    """The receiving side of a journey channel is gone."""


class StationNotFoundError(Exception):
    """No station suggestion exists at the requested position."""
