"""UTC timestamp helpers.

Timestamps are stored as ISO-8601 strings with millisecond precision and a
``Z`` suffix, e.g. ``2026-03-01T09:30:00.125Z``.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

ONE_TICK = timedelta(milliseconds=1)


def utc_now() -> datetime:
    """Current UTC time truncated to the millisecond."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def isoformat_utc(dt: Optional[datetime] = None) -> str:
    if dt is None:
        dt = utc_now()
    elif dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(raw: Optional[str]) -> Optional[datetime]:
    if not raw:
        return None
    try:
        dt = datetime.fromisoformat(str(raw).replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def next_after(previous: Optional[str], now: Optional[datetime] = None) -> datetime:
    """Return ``now`` or, if the clock has not moved past ``previous``, one tick later."""
    current = now or utc_now()
    prev = parse_iso(previous)
    if prev is not None and current <= prev:
        return prev + ONE_TICK
    return current


def today_utc() -> str:
    return utc_now().date().isoformat()
