"""In-memory location store owned by a single writer."""

import dataclasses
import logging
import uuid
from collections.abc import Iterable

from beachcast.config.schema import LocationConfig
from beachcast.models.location import Location, LocationDraft

logger = logging.getLogger(__name__)

# ~100m at mid-latitudes
DUPLICATE_COORD_TOLERANCE = 0.001
WEBCAM_URL_TEMPLATE = "https://www.windy.com/-Webcams/webcams?{lat:.3f},{lon:.3f},11"


def default_webcam_url(latitude: float, longitude: float) -> str:
    """Webcam search link around the given coordinates, rounded to 3 decimals."""
    return WEBCAM_URL_TEMPLATE.format(lat=latitude, lon=longitude)


class LocationStore:
    """Insertion-ordered mapping of locations.

    Records are immutable; mutations replace the stored record so that any
    Location handed out earlier stays a consistent snapshot.
    """

    def __init__(self, seeds: Iterable[LocationConfig] = ()):
        self._locations: dict[str, Location] = {}
        for seed in seeds:
            self._locations[seed.id] = Location(**seed.model_dump())

    def list(self) -> list[Location]:
        return list(self._locations.values())

    def get(self, location_id: str) -> Location | None:
        return self._locations.get(location_id)

    def add(self, draft: LocationDraft) -> Location:
        """Add a location, or return the existing one it duplicates.

        A duplicate has the same name (case-insensitive) or lies within
        DUPLICATE_COORD_TOLERANCE degrees on both axes.
        """
        webcam_url = draft.webcam_url or default_webcam_url(
            draft.latitude, draft.longitude
        )

        existing = self._find_duplicate(draft)
        if existing is not None:
            if not existing.webcam_url:
                existing = dataclasses.replace(existing, webcam_url=webcam_url)
                self._locations[existing.id] = existing
            logger.info("Location %r duplicates %s", draft.name, existing.id)
            return existing

        location = Location(
            id=uuid.uuid4().hex,
            name=draft.name,
            latitude=draft.latitude,
            longitude=draft.longitude,
            country=draft.country,
            state=draft.state,
            is_favorite=draft.is_favorite,
            webcam_url=webcam_url,
        )
        self._locations[location.id] = location
        logger.info("Added location %s (%s)", location.id, location.name)
        return location

    def remove(self, location_id: str) -> None:
        if self._locations.pop(location_id, None) is not None:
            logger.info("Removed location %s", location_id)

    def toggle_favorite(self, location_id: str) -> Location | None:
        location = self._locations.get(location_id)
        if location is None:
            return None
        location = dataclasses.replace(location, is_favorite=not location.is_favorite)
        self._locations[location_id] = location
        return location

    def _find_duplicate(self, draft: LocationDraft) -> Location | None:
        name = draft.name.lower()
        for loc in self._locations.values():
            if loc.name.lower() == name:
                return loc
            if (
                abs(loc.latitude - draft.latitude) < DUPLICATE_COORD_TOLERANCE
                and abs(loc.longitude - draft.longitude) < DUPLICATE_COORD_TOLERANCE
            ):
                return loc
        return None

    def __len__(self) -> int:
        return len(self._locations)
