"""Tests for the geocoding client with mocked httpx."""

import asyncio

import httpx
import pytest
import respx

from beachcast.errors import SourceUnavailable
from beachcast.ingest.geocoding_client import GeocodingClient
from conftest import TEST_PROVIDERS, load_fixture

GEO_URL = "https://test-geo.example.com/v1/search"


@pytest.fixture
def geocoder() -> GeocodingClient:
    return GeocodingClient(TEST_PROVIDERS)


class TestSearch:
    @respx.mock
    def test_success(self, geocoder: GeocodingClient):
        route = respx.get(GEO_URL).mock(
            return_value=httpx.Response(200, json=load_fixture("geocoding_nazare.json"))
        )

        results = asyncio.run(geocoder.search("Nazaré"))
        assert len(results) == 2
        assert results[0]["admin1"] == "Leiria"
        params = route.calls.last.request.url.params
        assert params["name"] == "Nazaré"
        assert params["count"] == "10"
        assert params["language"] == "en"

    @respx.mock
    def test_no_results_key(self, geocoder: GeocodingClient):
        respx.get(GEO_URL).mock(
            return_value=httpx.Response(200, json={"generationtime_ms": 0.2})
        )

        assert asyncio.run(geocoder.search("zzzz")) == []

    @respx.mock
    def test_count_caps_results(self, geocoder: GeocodingClient):
        many = {"results": [{"name": f"P{i}", "latitude": 1, "longitude": 1} for i in range(15)]}
        respx.get(GEO_URL).mock(return_value=httpx.Response(200, json=many))

        assert len(asyncio.run(geocoder.search("P", count=10))) == 10

    @respx.mock
    def test_server_error(self, geocoder: GeocodingClient):
        respx.get(GEO_URL).mock(return_value=httpx.Response(500))

        with pytest.raises(SourceUnavailable) as exc:
            asyncio.run(geocoder.search("Nazaré"))
        assert exc.value.status_code == 500

    @respx.mock
    def test_network_error(self, geocoder: GeocodingClient):
        respx.get(GEO_URL).mock(side_effect=httpx.ConnectTimeout("slow"))

        with pytest.raises(SourceUnavailable):
            asyncio.run(geocoder.search("Nazaré"))

    @respx.mock
    def test_null_results(self, geocoder: GeocodingClient):
        respx.get(GEO_URL).mock(return_value=httpx.Response(200, json={"results": None}))

        assert asyncio.run(geocoder.search("zzzz")) == []

    @pytest.mark.parametrize("body", [{"results": "Nazaré"}, {"results": {"name": "x"}}, ["x"]])
    @respx.mock
    def test_unexpected_shape(self, geocoder: GeocodingClient, body):
        respx.get(GEO_URL).mock(return_value=httpx.Response(200, json=body))

        with pytest.raises(SourceUnavailable, match="Unexpected response shape"):
            asyncio.run(geocoder.search("Nazaré"))
