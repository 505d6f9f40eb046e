"""Conversion of Navitia payloads into domain models."""

import logging
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

from pydantic import ValidationError

from sncf_departures.adapters.navitia_api.constants import (
    DISPLAY_DATE_FORMAT,
    NAVITIA_DATETIME_FORMAT,
    NAVITIA_TIMEZONE,
)
from sncf_departures.adapters.navitia_api.payloads import NavitiaJourney, NavitiaPlace
from sncf_departures.domain.models.journey import Journey
from sncf_departures.domain.models.place import Place

logger = logging.getLogger(__name__)

_TZ = ZoneInfo(NAVITIA_TIMEZONE)


def parse_navitia_datetime(value: str) -> datetime:
    """Parse a Navitia ``YYYYMMDDTHHMMSS`` local time into an aware datetime."""
    return datetime.strptime(value, NAVITIA_DATETIME_FORMAT).replace(tzinfo=_TZ)


def parse_place(raw: dict[str, Any]) -> Place | None:
    """Build a Place from a Navitia place entry, or None if it has no id."""
    try:
        payload = NavitiaPlace.model_validate(raw)
    except ValidationError as e:
        logger.warning(f"Skipping malformed place entry: {e}")
        return None
    if not payload.id:
        return None
    return Place(id=payload.id, name=payload.name or payload.id, kind=payload.embedded_type)


def parse_places(entries: list[dict[str, Any]]) -> list[Place]:
    places = []
    for raw in entries:
        if not isinstance(raw, dict):
            continue
        place = parse_place(raw)
        if place is not None:
            places.append(place)
    return places


def parse_journey(raw: dict[str, Any]) -> Journey | None:
    """Build a Journey from a Navitia journey entry, or None if it is malformed."""
    try:
        payload = NavitiaJourney.model_validate(raw)
        departure = parse_navitia_datetime(payload.departure_date_time)
        arrival = parse_navitia_datetime(payload.arrival_date_time)
    except (ValidationError, ValueError) as e:
        logger.warning(f"Skipping malformed journey entry: {e}")
        return None

    return Journey(
        departure=departure,
        arrival=arrival,
        display_date=departure.strftime(DISPLAY_DATE_FORMAT),
        duration_seconds=payload.duration,
        transfer_count=payload.nb_transfers,
    )


def parse_journeys(entries: list[dict[str, Any]]) -> list[Journey]:
    """Parse journey entries in the order the API returned them."""
    journeys = []
    for raw in entries:
        if not isinstance(raw, dict):
            continue
        journey = parse_journey(raw)
        if journey is not None:
            journeys.append(journey)
    return journeys


def format_navitia_datetime(value: datetime) -> str:
    """Format an aware datetime as a Navitia local time parameter."""
    return value.astimezone(_TZ).strftime(NAVITIA_DATETIME_FORMAT)
