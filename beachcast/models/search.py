"""Place-name search result model."""

from dataclasses import dataclass

from beachcast.models.location import LocationDraft


@dataclass(frozen=True)
class SearchResult:
    name: str
    display_name: str
    latitude: float
    longitude: float
    country: str
    state: str | None = None

    def to_draft(
        self, is_favorite: bool = False, webcam_url: str | None = None
    ) -> LocationDraft:
        """Turn a picked result into a draft for the location store."""
        return LocationDraft(
            name=self.name,
            latitude=self.latitude,
            longitude=self.longitude,
            country=self.country,
            state=self.state,
            is_favorite=is_favorite,
            webcam_url=(webcam_url or "").strip() or None,
        )
