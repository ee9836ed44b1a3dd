"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from typing import TypeAlias

LocationId: TypeAlias = str

# Rendered in place of any value the sources did not provide.
PLACEHOLDER = "—"
NOT_AVAILABLE = "N/A"


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()


def to_float(value: object) -> float | None:
    """Coerce a raw payload value to float, mapping absent or invalid input to None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
