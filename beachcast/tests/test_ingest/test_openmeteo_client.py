"""Tests for the Open-Meteo client with mocked httpx."""

import asyncio

import httpx
import pytest
import respx

from beachcast.errors import SourceUnavailable
from beachcast.ingest.openmeteo_client import OpenMeteoClient
from conftest import TEST_PROVIDERS

AIR_URL = "https://test-air.example.com/v1/forecast"
MARINE_URL = "https://test-marine.example.com/v1/marine"


@pytest.fixture
def client() -> OpenMeteoClient:
    return OpenMeteoClient(TEST_PROVIDERS)


class TestFetchAir:
    @respx.mock
    def test_success(self, client: OpenMeteoClient, air_payload: dict):
        route = respx.get(AIR_URL).mock(
            return_value=httpx.Response(200, json=air_payload)
        )

        result = asyncio.run(client.fetch_air(38.7329, -9.4730))
        assert result["current"]["temperature_2m"] == 22.4
        params = route.calls.last.request.url.params
        assert params["latitude"] == "38.7329"
        assert params["longitude"] == "-9.473"
        assert params["timezone"] == "auto"
        assert "relative_humidity_2m" in params["current"]
        assert params["daily"] == "temperature_2m_max,temperature_2m_min"

    @respx.mock
    def test_user_agent_header(self, client: OpenMeteoClient, air_payload: dict):
        route = respx.get(AIR_URL).mock(
            return_value=httpx.Response(200, json=air_payload)
        )

        asyncio.run(client.fetch_air(38.7, -9.4))
        assert "beachcast" in route.calls[0].request.headers["user-agent"]

    @respx.mock
    def test_server_error(self, client: OpenMeteoClient):
        respx.get(AIR_URL).mock(return_value=httpx.Response(503))

        with pytest.raises(SourceUnavailable) as exc:
            asyncio.run(client.fetch_air(38.7, -9.4))
        assert exc.value.source == "air"
        assert exc.value.status_code == 503

    @respx.mock
    def test_no_retry(self, client: OpenMeteoClient, air_payload: dict):
        route = respx.get(AIR_URL).mock(
            side_effect=[
                httpx.Response(503),
                httpx.Response(200, json=air_payload),
            ]
        )

        with pytest.raises(SourceUnavailable):
            asyncio.run(client.fetch_air(38.7, -9.4))
        assert route.call_count == 1

    @respx.mock
    def test_network_error(self, client: OpenMeteoClient):
        respx.get(AIR_URL).mock(side_effect=httpx.ConnectError("boom"))

        with pytest.raises(SourceUnavailable) as exc:
            asyncio.run(client.fetch_air(38.7, -9.4))
        assert exc.value.status_code is None

    @respx.mock
    def test_non_json_body(self, client: OpenMeteoClient):
        respx.get(AIR_URL).mock(return_value=httpx.Response(200, text="<html>"))

        with pytest.raises(SourceUnavailable):
            asyncio.run(client.fetch_air(38.7, -9.4))


class TestFetchMarine:
    @respx.mock
    def test_success(self, client: OpenMeteoClient, marine_payload: dict):
        route = respx.get(MARINE_URL).mock(
            return_value=httpx.Response(200, json=marine_payload)
        )

        result = asyncio.run(client.fetch_marine(38.7329, -9.4730))
        assert result["current"]["sea_surface_temperature"] == 17.6
        params = route.calls.last.request.url.params
        assert "sea_surface_temperature" in params["current"]
        assert "wave_height" in params["hourly"]

    @respx.mock
    def test_not_found(self, client: OpenMeteoClient):
        respx.get(MARINE_URL).mock(return_value=httpx.Response(400, json={"error": True}))

        with pytest.raises(SourceUnavailable) as exc:
            asyncio.run(client.fetch_marine(0.0, 0.0))
        assert exc.value.source == "marine"


class TestFetchTideSeries:
    @respx.mock
    def test_requests_configured_variable(self, client: OpenMeteoClient, tide_payload: dict):
        route = respx.get(MARINE_URL).mock(
            return_value=httpx.Response(200, json=tide_payload)
        )

        result = asyncio.run(client.fetch_tide_series(38.7329, -9.4730))
        assert len(result["hourly"]["time"]) == 8
        assert route.calls.last.request.url.params["hourly"] == "sea_level_height_msl"

    @respx.mock
    def test_shared_http_client(self, tide_payload: dict):
        respx.get(MARINE_URL).mock(return_value=httpx.Response(200, json=tide_payload))

        async def run():
            async with httpx.AsyncClient() as http:
                client = OpenMeteoClient(TEST_PROVIDERS, http=http)
                return await client.fetch_tide_series(38.7, -9.4)

        assert "hourly" in asyncio.run(run())
