"""Weather, water and tide models returned to the presentation layer.

Any numeric field typed ``float | None`` uses ``None`` for "unknown": the
source did not provide the value. Zero is always a real reading. For wave
height and direction, ``None`` additionally means no wave data exists at
the location.
"""

from dataclasses import dataclass, field
from enum import StrEnum

from beachcast.models.common import PLACEHOLDER, utc_now_iso
from beachcast.models.location import Location


class TideType(StrEnum):
    HIGH = "high"
    LOW = "low"
    RISING = "rising"
    FALLING = "falling"


@dataclass(frozen=True)
class WeatherSnapshot:
    temperature: float | None
    feels_like: float | None
    humidity: float | None
    wind_speed: float | None
    wind_direction: float | None  # degrees, direction the wind blows from
    description: str = PLACEHOLDER
    icon: str = "clear"


@dataclass(frozen=True)
class WaterSnapshot:
    temperature: float | None
    wave_height: float | None = None  # meters
    wave_direction: float | None = None  # degrees


@dataclass(frozen=True)
class TideReading:
    height: float | None
    type: TideType
    time: str  # HH:MM local


@dataclass(frozen=True)
class TideEvent:
    type: TideType
    height: float
    time: str  # HH:MM local

    def __post_init__(self) -> None:
        if self.type not in (TideType.HIGH, TideType.LOW):
            raise ValueError(f"Tide event must be high or low, got {self.type}")


@dataclass(frozen=True)
class TideState:
    current: TideReading
    upcoming: tuple[TideEvent, ...] = ()

    @property
    def is_unknown(self) -> bool:
        return self.current.height is None


@dataclass(frozen=True)
class CurrentConditions:
    weather: WeatherSnapshot
    water: WaterSnapshot
    tide: TideState


@dataclass(frozen=True)
class ForecastDay:
    date: str  # YYYY-MM-DD
    weather: WeatherSnapshot
    water: WaterSnapshot
    tide: TideState
    high_temp: float | None
    low_temp: float | None


@dataclass(frozen=True)
class WeatherBundle:
    location: Location
    current: CurrentConditions
    forecast: tuple[ForecastDay, ...]
    fetched_at: str = field(default_factory=utc_now_iso)
