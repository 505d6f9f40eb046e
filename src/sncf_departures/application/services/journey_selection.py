"""Merging refreshed journey batches while keeping the user's selection."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sncf_departures.domain.models.journey import Journey, JourneyKey


@dataclass(frozen=True)
class MergeResult:
    """Outcome of replacing the displayed journeys with a fresh batch."""

    journeys: list[Journey]
    selected_index: int
    previous_key: JourneyKey | None

    @property
    def selected(self) -> Journey | None:
        if not self.journeys:
            return None
        return self.journeys[self.selected_index]

    @property
    def target_changed(self) -> bool:
        """Whether the selection now points at a different logical journey."""
        selected = self.selected
        if selected is None:
            return self.previous_key is not None
        return selected.key != self.previous_key


def clamp_index(index: int, length: int) -> int:
    """Clamp a selection index into a list of ``length`` items (0 when empty)."""
    if length == 0:
        return 0
    return max(0, min(index, length - 1))


def selected_key(journeys: list[Journey], selected_index: int) -> JourneyKey | None:
    """Composite key of the selected journey, or None when nothing is displayed."""
    if not journeys:
        return None
    return journeys[clamp_index(selected_index, len(journeys))].key


def find_journey(journeys: list[Journey], key: JourneyKey) -> int | None:
    """Position of the first journey with the given composite key."""
    for index, journey in enumerate(journeys):
        if journey.key == key:
            return index
    return None


def merge_journeys(
    current: list[Journey], selected_index: int, batch: list[Journey]
) -> MergeResult:
    """Replace ``current`` with ``batch`` and re-resolve the selection.

    The batch is taken verbatim, in whatever order the remote source sent it.
    The previously selected journey is looked up by composite key; when it
    is gone, the old index is clamped into the new list.
    """
    previous_key = selected_key(current, selected_index)
    journeys = list(batch)

    if not journeys:
        return MergeResult(journeys=journeys, selected_index=0, previous_key=previous_key)

    if previous_key is None:
        return MergeResult(journeys=journeys, selected_index=0, previous_key=None)

    found = find_journey(journeys, previous_key)
    if found is not None:
        new_index = found
    else:
        new_index = clamp_index(selected_index, len(journeys))
    return MergeResult(journeys=journeys, selected_index=new_index, previous_key=previous_key)


def countdown_to(journey: Journey, now: datetime) -> timedelta:
    """Time until the journey departs, never negative."""
    return max(timedelta(0), journey.departure - now)
