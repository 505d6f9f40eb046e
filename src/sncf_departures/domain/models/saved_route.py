"""Persisted route configuration models."""

from pydantic import BaseModel, ConfigDict

from sncf_departures.domain.models.place import Place


class SavedPlace(BaseModel):
    """A place reference as stored on disk (id and display name only)."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str

    @classmethod
    def from_place(cls, place: Place) -> "SavedPlace":
        """Keep only the persisted fields of a fetched place."""
        return cls(id=place.id, name=place.name)

    def to_place(self) -> Place:
        """Rebuild a Place; saved references are always stop areas."""
        return Place(id=self.id, name=self.name, kind="stop_area")


class SavedRoute(BaseModel):
    """The saved origin and destination of the active session."""

    model_config = ConfigDict(frozen=True)

    start: SavedPlace
    destination: SavedPlace
