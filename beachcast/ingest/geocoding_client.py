"""Open-Meteo geocoding client for free-text place search."""

import logging

import httpx

from beachcast.config.schema import ProvidersConfig
from beachcast.errors import SourceUnavailable

logger = logging.getLogger(__name__)


class GeocodingClient:
    def __init__(
        self,
        providers: ProvidersConfig | None = None,
        http: httpx.AsyncClient | None = None,
    ):
        self.providers = providers or ProvidersConfig()
        self._http = http

    async def search(self, query: str, count: int = 10) -> list[dict]:
        """Return raw candidate places for a query. Empty list when none match."""
        url = self.providers.geocoding_base_url
        params = {"name": query, "count": count, "language": "en", "format": "json"}
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
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.warning("Geocoding error for q=%r: %s", query, e)
            raise SourceUnavailable(
                "geocoding", str(e), e.response.status_code
            ) from e
        except httpx.RequestError as e:
            logger.warning("Geocoding request failed for q=%r: %s", query, e)
            raise SourceUnavailable("geocoding", f"Request failed: {e}") from e
        except ValueError as e:
            raise SourceUnavailable("geocoding", "Response body is not JSON") from e

        results = (data.get("results") or []) if isinstance(data, dict) else None
        if not isinstance(results, list):
            logger.warning("Geocoding returned unexpected shape for q=%r", query)
            raise SourceUnavailable("geocoding", "Unexpected response shape")
        return results[:count]
