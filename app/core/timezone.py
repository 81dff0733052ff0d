# app/core/timezone.py
from datetime import datetime, timezone

def utc_now() -> datetime:
    """Current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)

def as_utc(dt: datetime) -> datetime:
    # SQLite and MariaDB hand back naive datetimes; they are stored as UTC
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)

def format_utc(dt: datetime) -> str:
    if dt is None:
        return None
    return as_utc(dt).isoformat()
