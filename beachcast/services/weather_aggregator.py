"""Weather aggregator: concurrent source fetches merged into one bundle."""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from beachcast.config.schema import BeachcastConfig
from beachcast.errors import MalformedSeries, SourceUnavailable
from beachcast.ingest.normalizers import (
    air_to_weather,
    daily_to_forecast,
    failed_water,
    failed_weather,
    marine_to_water,
)
from beachcast.ingest.openmeteo_client import OpenMeteoClient
from beachcast.ingest.tide_deriver import derive_tide, extract_tide_series, unknown_tide
from beachcast.models.common import utc_now
from beachcast.models.location import Location
from beachcast.models.weather import CurrentConditions, TideState, WeatherBundle
from beachcast.store.location_store import LocationStore

logger = logging.getLogger(__name__)


class WeatherAggregator:
    def __init__(
        self,
        store: LocationStore,
        client: OpenMeteoClient,
        config: BeachcastConfig | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.store = store
        self.client = client
        self.config = config or BeachcastConfig()
        self.clock = clock

    async def get_bundle(self, location_id: str) -> WeatherBundle | None:
        """Fetch and assemble conditions for a stored location.

        Returns None when the id is unknown. Source failures never raise;
        they degrade the affected part of the bundle.
        """
        location = self.store.get(location_id)
        if location is None:
            logger.info("Weather requested for unknown location %s", location_id)
            return None
        return await self.build_bundle(location)

    async def build_bundle(self, location: Location) -> WeatherBundle:
        lat, lon = location.latitude, location.longitude
        air, marine, tide = await asyncio.gather(
            self.client.fetch_air(lat, lon),
            self.client.fetch_marine(lat, lon),
            self._fetch_tide(lat, lon),
            return_exceptions=True,
        )

        air = self._payload_or_none("air", location, air)
        marine = self._payload_or_none("marine", location, marine)
        if isinstance(tide, BaseException):
            self._log_failure("tide", location, tide)
            tide = unknown_tide()

        weather = air_to_weather(air) if air is not None else failed_weather()
        water = marine_to_water(marine) if marine is not None else failed_water()

        # Forecast synthesis needs both sources; no partial forecast.
        if air is not None and marine is not None:
            forecast = tuple(
                daily_to_forecast(air, marine, self.config.forecast.max_days)
            )
        else:
            forecast = ()

        logger.info(
            "Bundle for %s: air=%s marine=%s tide=%s forecast_days=%d",
            location.id,
            "ok" if air is not None else "failed",
            "ok" if marine is not None else "failed",
            "unknown" if tide.is_unknown else "ok",
            len(forecast),
        )
        return WeatherBundle(
            location=location,
            current=CurrentConditions(weather=weather, water=water, tide=tide),
            forecast=forecast,
        )

    async def _fetch_tide(self, latitude: float, longitude: float) -> TideState:
        payload = await self.client.fetch_tide_series(latitude, longitude)
        times, heights = extract_tide_series(payload, self.config.providers.tide_variable)
        return derive_tide(times, heights, self._local_now(payload))

    def _local_now(self, payload: dict) -> datetime:
        """Current wall-clock time at the location, from the payload's UTC offset."""
        offset = payload.get("utc_offset_seconds") or 0
        now = self.clock() + timedelta(seconds=int(offset))
        return now.replace(tzinfo=None)

    def _payload_or_none(self, source: str, location: Location, result) -> dict | None:
        if isinstance(result, BaseException):
            self._log_failure(source, location, result)
            return None
        return result

    def _log_failure(self, source: str, location: Location, error: BaseException) -> None:
        if isinstance(error, (SourceUnavailable, MalformedSeries)):
            logger.warning("%s unavailable for %s: %s", source, location.id, error)
        elif isinstance(error, Exception):
            logger.error(
                "Unexpected %s failure for %s", source, location.id, exc_info=error
            )
        else:
            raise error
