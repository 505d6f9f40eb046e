"""Place domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Place:
    """A station or stop area returned by the remote lookup."""

    id: str
    name: str
    kind: str | None = None  # Navitia embedded_type, e.g. "stop_area"
