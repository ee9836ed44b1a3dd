"""Place search: geocoding lookup with an embedded Iberian beach fallback."""

import logging

from beachcast.config.defaults import IBERIAN_BEACHES
from beachcast.config.schema import SearchConfig
from beachcast.errors import SourceUnavailable
from beachcast.ingest.geocoding_client import GeocodingClient
from beachcast.models.common import to_float
from beachcast.models.search import SearchResult

logger = logging.getLogger(__name__)

FALLBACK_RESULTS: list[SearchResult] = [
    SearchResult(
        name=name,
        display_name=display_name,
        latitude=lat,
        longitude=lon,
        country=country,
        state=region,
    )
    for name, display_name, lat, lon, country, region in IBERIAN_BEACHES
]


class SearchService:
    def __init__(
        self,
        geocoder: GeocodingClient,
        config: SearchConfig | None = None,
        fallback: list[SearchResult] | None = None,
    ):
        self.geocoder = geocoder
        self.config = config or SearchConfig()
        self.fallback = FALLBACK_RESULTS if fallback is None else fallback

    async def search(self, query: str) -> list[SearchResult]:
        """Search places by free text.

        Queries shorter than min_query_length return [] without any lookup.
        """
        term = query.strip()
        if len(term) < self.config.min_query_length:
            return []

        try:
            raw = await self.geocoder.search(term, count=self.config.max_results)
            results = [r for r in (_from_geocoding(item) for item in raw) if r is not None]
        except SourceUnavailable as e:
            logger.warning("Geocoding unavailable for %r, using fallback: %s", term, e)
            results = []

        if results:
            return results[: self.config.max_results]
        return self.filter_fallback(term)

    def filter_fallback(self, term: str) -> list[SearchResult]:
        needle = term.lower()
        matches = [
            r for r in self.fallback
            if needle in r.name.lower()
            or needle in r.display_name.lower()
            or (r.state is not None and needle in r.state.lower())
            or needle in r.country.lower()
        ]
        return matches[: self.config.max_results]


def _from_geocoding(item) -> SearchResult | None:
    """Map one geocoding candidate; candidates without coordinates are dropped."""
    if not isinstance(item, dict):
        return None
    lat = to_float(item.get("latitude"))
    lon = to_float(item.get("longitude"))
    name = item.get("name")
    if lat is None or lon is None or not isinstance(name, str) or not name:
        return None
    region = item.get("admin1") or None
    country = item.get("country") or ""
    return SearchResult(
        name=name,
        display_name=", ".join(p for p in (name, region, country) if p),
        latitude=lat,
        longitude=lon,
        country=country,
        state=region,
    )
