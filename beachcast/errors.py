"""Error taxonomy for source fetches, tide series and location lookups."""


class BeachcastError(Exception):
    """Base class for beachcast errors."""


class SourceUnavailable(BeachcastError):
    """Raised when a remote data source fails or returns a non-success status."""

    def __init__(self, source: str, message: str, status_code: int | None = None):
        super().__init__(f"{source}: {message}")
        self.source = source
        self.status_code = status_code


class MalformedSeries(BeachcastError):
    """Raised when a tide payload lacks usable time/height arrays."""


class LocationNotFound(BeachcastError):
    """Raised at the API and CLI edge when a location id is unknown."""

    def __init__(self, location_id: str):
        super().__init__(f"Location not found: {location_id}")
        self.location_id = location_id
