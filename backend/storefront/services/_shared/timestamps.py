from __future__ import annotations

from datetime import UTC, datetime


def epoch_to_datetime(value: int | None) -> datetime | None:
    """Convert epoch seconds to an aware UTC datetime (``None`` stays ``None``)."""
    if value is None:
        return None
    return datetime.fromtimestamp(int(value), tz=UTC)
