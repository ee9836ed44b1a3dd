"""Beach session: the single consumer of the store, aggregator and search.

Owns the current selection. Weather requests are not cancelled when the
user picks another location; instead each request carries a ticket and a
response whose ticket is no longer current is dropped.
"""

import logging
from dataclasses import dataclass

from beachcast.models.location import Location, LocationDraft
from beachcast.models.search import SearchResult
from beachcast.models.weather import WeatherBundle
from beachcast.services.debounce import Debouncer
from beachcast.services.search_service import SearchService
from beachcast.services.weather_aggregator import WeatherAggregator
from beachcast.store.location_store import LocationStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionTicket:
    generation: int
    location_id: str


class SelectionTracker:
    def __init__(self) -> None:
        self._generation = 0
        self._current: SelectionTicket | None = None

    def issue(self, location_id: str) -> SelectionTicket:
        self._generation += 1
        self._current = SelectionTicket(self._generation, location_id)
        return self._current

    def is_current(self, ticket: SelectionTicket) -> bool:
        return self._current == ticket

    @property
    def current(self) -> SelectionTicket | None:
        return self._current


class BeachSession:
    def __init__(
        self,
        store: LocationStore,
        aggregator: WeatherAggregator,
        search_service: SearchService,
        debounce_seconds: float = 0.3,
    ):
        self.store = store
        self.aggregator = aggregator
        self.search_service = search_service
        self.tracker = SelectionTracker()
        self.selected: WeatherBundle | None = None
        self._search = Debouncer(debounce_seconds, search_service.search)

    def locations(self) -> list[Location]:
        return self.store.list()

    async def load(self) -> WeatherBundle | None:
        """Select the first favorite location, else the first location."""
        locations = self.store.list()
        first = next((loc for loc in locations if loc.is_favorite), None)
        if first is None and locations:
            first = locations[0]
        if first is None:
            self.selected = None
            return None
        return await self.select(first.id)

    async def select(self, location_id: str) -> WeatherBundle | None:
        """Fetch weather for a location and publish it if still selected.

        Returns None for an unknown id or when a newer selection superseded
        this one before the response arrived.
        """
        ticket = self.tracker.issue(location_id)
        bundle = await self.aggregator.get_bundle(location_id)
        if not self.tracker.is_current(ticket):
            logger.debug(
                "Discarding stale weather for %s (generation %d)",
                location_id, ticket.generation,
            )
            return None
        self.selected = bundle
        return bundle

    def add_location(self, draft: LocationDraft) -> Location:
        return self.store.add(draft)

    def add_search_result(
        self, result: SearchResult, is_favorite: bool = False, webcam_url: str | None = None
    ) -> Location:
        return self.store.add(result.to_draft(is_favorite, webcam_url))

    def toggle_favorite(self, location_id: str) -> Location | None:
        return self.store.toggle_favorite(location_id)

    async def remove_location(self, location_id: str) -> None:
        """Remove a location; if it was selected, select the first remaining one.

        The latest ticket decides what is selected: a still-loading request
        for the removed location is superseded so its response is discarded.
        """
        self.store.remove(location_id)
        if self.selected is not None and self.selected.location.id == location_id:
            self.selected = None
        latest = self.tracker.current
        if latest is None or latest.location_id != location_id:
            return
        remaining = self.store.list()
        if remaining:
            await self.select(remaining[0].id)
        else:
            self.tracker.issue("")
            self.selected = None

    async def search(self, query: str) -> list[SearchResult] | None:
        """Debounced search. Returns None when a newer query superseded this one."""
        return await self._search.call(query)
