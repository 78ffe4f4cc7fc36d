"""UTC datetime and block-time utilities."""

from datetime import UTC, datetime, timedelta

MINUTES_PER_BLOCK = 1  # Liquid block interval


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(UTC)


def blocks_to_duration(blocks: int) -> timedelta:
    """Approximate wall-clock time for ``blocks`` blocks; negative counts as 0."""
    return timedelta(minutes=max(0, blocks) * MINUTES_PER_BLOCK)
