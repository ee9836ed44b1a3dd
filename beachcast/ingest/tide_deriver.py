"""Derive the current tide reading and the next high/low from an hourly series.

This is a heuristic over sampled heights, not a harmonic tide model: a
turning point is reported at the sample where the series changes
direction.
"""

import logging
from collections.abc import Sequence
from datetime import datetime

from beachcast.errors import MalformedSeries
from beachcast.models.weather import TideEvent, TideReading, TideState, TideType

logger = logging.getLogger(__name__)


def unknown_tide() -> TideState:
    """Tide state for when no usable series is available."""
    return TideState(
        current=TideReading(height=None, type=TideType.LOW, time=""),
        upcoming=(),
    )


def extract_tide_series(payload: dict, variable: str) -> tuple[list[str], list[float]]:
    """Pull parallel time/height arrays out of an hourly marine payload."""
    hourly = payload.get("hourly")
    if not isinstance(hourly, dict):
        raise MalformedSeries("payload has no hourly block")
    times = hourly.get("time")
    heights = hourly.get(variable)
    if not isinstance(times, list) or not isinstance(heights, list):
        raise MalformedSeries(f"hourly block lacks time or {variable}")
    if not times or len(times) != len(heights):
        raise MalformedSeries(
            f"series length mismatch: {len(times)} times, {len(heights)} heights"
        )
    return times, heights


def derive_tide(
    times: Sequence[str] | None,
    heights: Sequence[float | None] | None,
    now: datetime,
) -> TideState:
    """Derive tide state at ``now`` (local time of the series).

    Never raises: empty, mismatched or null-containing series produce
    unknown_tide().
    """
    if not times or not heights or len(times) != len(heights):
        return unknown_tide()
    if any(h is None for h in heights):
        logger.debug("Tide series contains null heights, treating as unknown")
        return unknown_tide()

    idx = current_index(times, now)
    current_height = float(heights[idx])

    # At the final sample there is no next value to compare; report falling.
    if idx + 1 < len(heights) and heights[idx + 1] > heights[idx]:
        trend = TideType.RISING
    else:
        trend = TideType.FALLING

    next_high: TideEvent | None = None
    next_low: TideEvent | None = None
    for j in range(idx + 1, len(heights) - 1):
        prev_h, h, next_h = heights[j - 1], heights[j], heights[j + 1]
        if next_high is None and h > prev_h and h >= next_h:
            next_high = TideEvent(TideType.HIGH, round(float(h), 2), _hhmm(times[j]))
        if next_low is None and h < prev_h and h <= next_h:
            next_low = TideEvent(TideType.LOW, round(float(h), 2), _hhmm(times[j]))
        if next_high is not None and next_low is not None:
            break

    upcoming = tuple(e for e in (next_high, next_low) if e is not None)
    return TideState(
        current=TideReading(
            height=round(current_height, 2),
            type=trend,
            time=_hhmm(times[idx]),
        ),
        upcoming=upcoming,
    )


def current_index(times: Sequence[str], now: datetime) -> int:
    """Index of the sample for the hour containing ``now``, else 0."""
    hour_prefix = now.strftime("%Y-%m-%dT%H")
    for i, t in enumerate(times):
        if str(t).startswith(hour_prefix):
            return i
    return 0


def _hhmm(timestamp: str) -> str:
    return str(timestamp)[11:16]
