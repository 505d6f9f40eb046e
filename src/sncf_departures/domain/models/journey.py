"""Journey domain model."""

from dataclasses import dataclass
from datetime import datetime
from typing import NamedTuple


class JourneyKey(NamedTuple):
    """Composite identity of a journey across independent fetches.

    The remote source assigns no stable id to a journey, so two journeys
    from different batches are the same one when all four fields match.
    """

    departure: datetime
    arrival: datetime
    duration_seconds: int
    transfer_count: int


@dataclass(frozen=True)
class Journey:
    """One scheduled trip option between two places."""

    departure: datetime
    arrival: datetime
    display_date: str
    duration_seconds: int
    transfer_count: int

    def __post_init__(self) -> None:
        if self.duration_seconds < 0:
            raise ValueError(f"duration_seconds must be >= 0, got {self.duration_seconds}")
        if self.transfer_count < 0:
            raise ValueError(f"transfer_count must be >= 0, got {self.transfer_count}")

    @property
    def key(self) -> JourneyKey:
        """Composite key used to re-identify this journey in a later batch."""
        return JourneyKey(
            departure=self.departure,
            arrival=self.arrival,
            duration_seconds=self.duration_seconds,
            transfer_count=self.transfer_count,
        )
