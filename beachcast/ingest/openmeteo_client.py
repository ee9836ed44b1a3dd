"""Open-Meteo air, marine and tide client.

Every fetch is a single attempt: failures surface as SourceUnavailable and
the caller decides how to degrade.
"""

import logging
from typing import Any

import httpx

from beachcast.config.schema import ProvidersConfig
from beachcast.errors import SourceUnavailable

logger = logging.getLogger(__name__)

AIR_CURRENT_VARS = [
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "wind_speed_10m",
    "wind_direction_10m",
]
AIR_DAILY_VARS = ["temperature_2m_max", "temperature_2m_min"]
MARINE_VARS = ["wave_height", "wave_direction", "sea_surface_temperature"]


class OpenMeteoClient:
    def __init__(
        self,
        providers: ProvidersConfig | None = None,
        http: httpx.AsyncClient | None = None,
    ):
        self.providers = providers or ProvidersConfig()
        self._http = http

    async def fetch_air(self, latitude: float, longitude: float) -> dict:
        """Current air conditions plus daily max/min temperature."""
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(AIR_CURRENT_VARS),
            "daily": ",".join(AIR_DAILY_VARS),
            "timezone": "auto",
        }
        return await self._get("air", self.providers.air_base_url, params)

    async def fetch_marine(self, latitude: float, longitude: float) -> dict:
        """Current and hourly sea-surface temperature and waves."""
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(MARINE_VARS),
            "hourly": ",".join(MARINE_VARS),
            "timezone": "auto",
        }
        return await self._get("marine", self.providers.marine_base_url, params)

    async def fetch_tide_series(self, latitude: float, longitude: float) -> dict:
        """Hourly sea level height series."""
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "hourly": self.providers.tide_variable,
            "timezone": "auto",
        }
        return await self._get("tide", self.providers.marine_base_url, params)

    async def _get(self, source: str, url: str, params: dict[str, Any]) -> dict:
        headers = {"User-Agent": self.providers.user_agent}
        try:
            if self._http is not None:
                resp = await self._http.get(
                    url, params=params, headers=headers,
                    timeout=self.providers.timeout_seconds,
                )
            else:
                async with httpx.AsyncClient(
                    timeout=self.providers.timeout_seconds
                ) as client:
                    resp = await client.get(url, params=params, headers=headers)
        except httpx.RequestError as e:
            logger.warning("Open-Meteo %s request failed: %s", source, e)
            raise SourceUnavailable(source, f"Request failed: {e}") from e

        if resp.status_code >= 400:
            logger.warning(
                "Open-Meteo %s returned %d: %s", source, resp.status_code, resp.text[:200]
            )
            raise SourceUnavailable(
                source, f"HTTP {resp.status_code}", resp.status_code
            )
        try:
            data = resp.json()
        except ValueError as e:
            raise SourceUnavailable(source, "Response body is not JSON") from e
        if not isinstance(data, dict):
            raise SourceUnavailable(source, "Unexpected response shape")
        return data
