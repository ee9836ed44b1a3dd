"""Output formatters for weather bundles."""

import dataclasses
import json

from beachcast.models.common import PLACEHOLDER
from beachcast.models.location import Location
from beachcast.models.weather import TideState, WeatherBundle


def fmt(value: float | None, unit: str = "", digits: int = 1) -> str:
    """Render a reading, or the placeholder glyph when unknown."""
    if value is None:
        return PLACEHOLDER
    return f"{value:.{digits}f}{unit}"


def format_location_line(loc: Location) -> str:
    star = "*" if loc.is_favorite else " "
    region = f"{loc.state}, " if loc.state else ""
    return (
        f"{star} {loc.id}  {loc.name} ({region}{loc.country}) "
        f"[{loc.latitude:.4f}, {loc.longitude:.4f}]"
    )


def format_tide(tide: TideState) -> str:
    if tide.is_unknown:
        return f"Tide: {PLACEHOLDER}"
    c = tide.current
    line = f"Tide: {fmt(c.height, ' m', 2)} {c.type} at {c.time}"
    if tide.upcoming:
        events = ", ".join(
            f"{e.type} {fmt(e.height, ' m', 2)} at {e.time}" for e in tide.upcoming
        )
        line += f" | Next: {events}"
    return line


def format_bundle_text(bundle: WeatherBundle) -> str:
    """Plain text rendering for the terminal."""
    loc = bundle.location
    w = bundle.current.weather
    water = bundle.current.water
    lines = [
        f"=== {loc.name} ({loc.country}) ===",
        f"Air: {fmt(w.temperature, '°C')} (feels {fmt(w.feels_like, '°C')}) | "
        f"Humidity: {fmt(w.humidity, '%', 0)} | "
        f"Wind: {fmt(w.wind_speed, ' km/h')} from {fmt(w.wind_direction, '°', 0)} | "
        f"{w.description}",
        f"Water: {fmt(water.temperature, '°C')} | "
        f"Waves: {fmt(water.wave_height, ' m')} from {fmt(water.wave_direction, '°', 0)}",
        format_tide(bundle.current.tide),
    ]
    if bundle.forecast:
        lines.append("Forecast:")
        for day in bundle.forecast:
            lines.append(
                f"  {day.date}  {fmt(day.low_temp, '°')} / {fmt(day.high_temp, '°')}"
                f"  water {fmt(day.water.temperature, '°C')}"
                f"  waves {fmt(day.water.wave_height, ' m')}"
            )
    else:
        lines.append(f"Forecast: {PLACEHOLDER}")
    if loc.webcam_url:
        lines.append(f"Webcam: {loc.webcam_url}")
    return "\n".join(lines)


def bundle_to_dict(bundle: WeatherBundle) -> dict:
    """JSON-ready dict; unknown readings are null."""
    return dataclasses.asdict(bundle)


def format_bundle_json(bundle: WeatherBundle) -> str:
    return json.dumps(bundle_to_dict(bundle), indent=2, ensure_ascii=False)
