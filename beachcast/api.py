"""Beachcast HTTP API: FastAPI surface over the beach session."""

import dataclasses

from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from beachcast.config.schema import BeachcastConfig
from beachcast.errors import LocationNotFound
from beachcast.ingest.geocoding_client import GeocodingClient
from beachcast.ingest.openmeteo_client import OpenMeteoClient
from beachcast.models.common import utc_now_iso
from beachcast.models.location import LocationDraft
from beachcast.reporting.formatters import bundle_to_dict
from beachcast.services.search_service import SearchService
from beachcast.services.session import BeachSession
from beachcast.services.weather_aggregator import WeatherAggregator
from beachcast.store.location_store import LocationStore


class LocationIn(BaseModel):
    name: str = Field(min_length=1)
    latitude: float
    longitude: float
    country: str = ""
    state: str | None = None
    is_favorite: bool = False
    webcam_url: str | None = None


def build_session(config: BeachcastConfig) -> BeachSession:
    """Wire store, clients and services from config."""
    store = LocationStore(config.locations)
    aggregator = WeatherAggregator(store, OpenMeteoClient(config.providers), config)
    search = SearchService(GeocodingClient(config.providers), config.search)
    return BeachSession(
        store, aggregator, search,
        debounce_seconds=config.search.debounce_ms / 1000,
    )


def create_app(
    config: BeachcastConfig | None = None, session: BeachSession | None = None
) -> FastAPI:
    config = config or BeachcastConfig()
    session = session or build_session(config)

    app = FastAPI(title="Beachcast", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def _not_found(location_id: str) -> HTTPException:
        return HTTPException(status_code=404, detail=str(LocationNotFound(location_id)))

    # ── Locations ───────────────────────────────────────────────

    @app.get("/api/locations")
    async def list_locations():
        return [dataclasses.asdict(loc) for loc in session.locations()]

    @app.post("/api/locations", status_code=201)
    async def add_location(body: LocationIn):
        location = session.add_location(LocationDraft(**body.model_dump()))
        return dataclasses.asdict(location)

    @app.delete("/api/locations/{location_id}", status_code=204)
    async def delete_location(location_id: str):
        """Unknown ids are a no-op and also answer 204."""
        await session.remove_location(location_id)
        return Response(status_code=204)

    @app.post("/api/locations/{location_id}/favorite")
    async def toggle_favorite(location_id: str):
        """Return the updated location; unknown ids are a no-op answering 204."""
        location = session.toggle_favorite(location_id)
        if location is None:
            return Response(status_code=204)
        return dataclasses.asdict(location)

    # ── Weather ─────────────────────────────────────────────────

    @app.get("/api/locations/{location_id}/weather")
    async def get_weather(location_id: str):
        """Composite conditions; source outages degrade fields, never the response."""
        bundle = await session.aggregator.get_bundle(location_id)
        if bundle is None:
            raise _not_found(location_id)
        return bundle_to_dict(bundle)

    # ── Selection ───────────────────────────────────────────────

    @app.get("/api/selection")
    async def get_selection():
        if session.selected is None:
            return Response(status_code=204)
        return bundle_to_dict(session.selected)

    @app.put("/api/selection/{location_id}")
    async def select_location(location_id: str):
        """Select a location. A response overtaken by a newer selection is 204."""
        if session.store.get(location_id) is None:
            raise _not_found(location_id)
        bundle = await session.select(location_id)
        if bundle is None:
            return Response(status_code=204)
        return bundle_to_dict(bundle)

    # ── Search ──────────────────────────────────────────────────

    @app.get("/api/search")
    async def search(q: str = ""):
        results = await session.search_service.search(q)
        return [dataclasses.asdict(r) for r in results]

    @app.get("/api/health")
    async def health():
        return {
            "status": "ok",
            "locations": len(session.store),
            "timestamp": utc_now_iso(),
        }

    return app
