"""Pydantic models for the parts of Navitia responses we read."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NavitiaPlace(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = ""
    name: str = ""
    embedded_type: str | None = None


class NavitiaPlacesResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    places: list[dict[str, Any]] = Field(default_factory=list)


class NavitiaJourney(BaseModel):
    model_config = ConfigDict(extra="ignore")

    departure_date_time: str
    arrival_date_time: str
    duration: int = Field(ge=0)
    nb_transfers: int = Field(default=0, ge=0)


class NavitiaJourneysResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    journeys: list[dict[str, Any]] = Field(default_factory=list)


class NavitiaError(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = ""
    message: str = ""
