from __future__ import annotations
from datetime import datetime, UTC

__all__ = ["utc_now", "epoch_millis", "now_millis"]

def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(UTC)

def epoch_millis(dt: datetime) -> int:
    """Milliseconds since the Unix epoch (naive input assumed UTC)."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return int(dt.timestamp() * 1000)

def now_millis() -> int:
    return epoch_millis(utc_now())
