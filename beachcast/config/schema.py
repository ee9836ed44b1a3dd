"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field


class ProvidersConfig(BaseModel):
    model_config = {"extra": "forbid"}

    air_base_url: str = "https://api.open-meteo.com/v1/forecast"
    marine_base_url: str = "https://marine-api.open-meteo.com/v1/marine"
    geocoding_base_url: str = "https://geocoding-api.open-meteo.com/v1/search"
    tide_variable: str = "sea_level_height_msl"
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    user_agent: str = "beachcast/0.1.0"


class SearchConfig(BaseModel):
    model_config = {"extra": "forbid"}

    debounce_ms: int = Field(default=300, ge=300)
    min_query_length: int = Field(default=2, ge=1)
    max_results: int = Field(default=10, ge=1, le=10)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_days: int = Field(default=7, ge=1, le=7)


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    id: str
    name: str
    latitude: float
    longitude: float
    country: str
    state: str | None = None
    is_favorite: bool = False
    webcam_url: str | None = None


class BeachcastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    providers: ProvidersConfig = ProvidersConfig()
    search: SearchConfig = SearchConfig()
    forecast: ForecastConfig = ForecastConfig()
    locations: list[LocationConfig] = []
