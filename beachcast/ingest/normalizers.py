"""Map raw Open-Meteo payloads onto the canonical weather and water shapes.

Pure functions; no I/O. Missing values become None, never zero.
"""

from beachcast.ingest.tide_deriver import unknown_tide
from beachcast.models.common import NOT_AVAILABLE, PLACEHOLDER, to_float
from beachcast.models.weather import ForecastDay, WaterSnapshot, WeatherSnapshot

MAX_FORECAST_DAYS = 7


def air_to_weather(air: dict) -> WeatherSnapshot:
    current = air.get("current") or {}
    return WeatherSnapshot(
        temperature=to_float(current.get("temperature_2m")),
        feels_like=to_float(current.get("apparent_temperature")),
        humidity=to_float(current.get("relative_humidity_2m")),
        wind_speed=to_float(current.get("wind_speed_10m")),
        wind_direction=to_float(current.get("wind_direction_10m")),
        description=PLACEHOLDER,
        icon="clear",
    )


def marine_to_water(marine: dict) -> WaterSnapshot:
    """Prefer the current block, then the first hourly sample."""
    return WaterSnapshot(
        temperature=_marine_value(marine, "sea_surface_temperature", 0),
        wave_height=_marine_value(marine, "wave_height", 0),
        wave_direction=_marine_value(marine, "wave_direction", 0),
    )


def daily_to_forecast(
    air: dict, marine: dict, max_days: int = MAX_FORECAST_DAYS
) -> list[ForecastDay]:
    """Build up to max_days forecast days from the air daily series.

    Approximations, since no per-day breakdown is requested for these
    fields:
    - humidity and wind for every day are the *current* readings;
    - temperature and feels-like are the day's max;
    - water for day i is the i-th *hourly* marine sample, falling back to
      the current marine reading;
    - tide is unknown.
    """
    daily = air.get("daily") or {}
    dates = daily.get("time") or []
    highs = daily.get("temperature_2m_max") or []
    lows = daily.get("temperature_2m_min") or []
    current = air.get("current") or {}
    hourly = marine.get("hourly") or {}
    marine_current = marine.get("current") or {}

    days: list[ForecastDay] = []
    for i, day in enumerate(dates[: min(max_days, MAX_FORECAST_DAYS)]):
        high = to_float(_at(highs, i))
        low = to_float(_at(lows, i))
        weather = WeatherSnapshot(
            temperature=high,
            feels_like=high,
            humidity=to_float(current.get("relative_humidity_2m")),
            wind_speed=to_float(current.get("wind_speed_10m")),
            wind_direction=to_float(current.get("wind_direction_10m")),
            description=PLACEHOLDER,
            icon="clear",
        )
        water = WaterSnapshot(
            temperature=_hourly_or_current(hourly, marine_current, "sea_surface_temperature", i),
            wave_height=_hourly_or_current(hourly, marine_current, "wave_height", i),
            wave_direction=_hourly_or_current(hourly, marine_current, "wave_direction", i),
        )
        days.append(
            ForecastDay(
                date=str(day),
                weather=weather,
                water=water,
                tide=unknown_tide(),
                high_temp=high,
                low_temp=low,
            )
        )
    return days


def failed_weather() -> WeatherSnapshot:
    return WeatherSnapshot(
        temperature=None,
        feels_like=None,
        humidity=None,
        wind_speed=None,
        wind_direction=None,
        description=NOT_AVAILABLE,
        icon="clear",
    )


def failed_water() -> WaterSnapshot:
    return WaterSnapshot(temperature=None, wave_height=None, wave_direction=None)


def _marine_value(marine: dict, key: str, index: int) -> float | None:
    value = to_float((marine.get("current") or {}).get(key))
    if value is None:
        value = to_float(_at((marine.get("hourly") or {}).get(key) or [], index))
    return value


def _hourly_or_current(hourly: dict, current: dict, key: str, index: int) -> float | None:
    value = to_float(_at(hourly.get(key) or [], index))
    if value is None:
        value = to_float(current.get(key))
    return value


def _at(values: list, index: int):
    return values[index] if index < len(values) else None
