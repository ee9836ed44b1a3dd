"""Beach location models."""

from dataclasses import dataclass

from beachcast.models.common import LocationId


@dataclass(frozen=True)
class LocationDraft:
    name: str
    latitude: float
    longitude: float
    country: str
    state: str | None = None
    is_favorite: bool = False
    webcam_url: str | None = None


@dataclass(frozen=True)
class Location:
    id: LocationId
    name: str
    latitude: float
    longitude: float
    country: str
    state: str | None = None
    is_favorite: bool = False
    webcam_url: str | None = None
