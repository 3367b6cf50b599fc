from __future__ import annotations
from datetime import datetime, timedelta, timezone
import math

MILLISECONDS_PER_DAY = 86_400_000
JULIAN_1970 = 2440588.0
JULIAN_2000 = 2451545.0

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_julian_date(ms: float) -> float:
    """Unix milliseconds -> Julian Date (the Julian day starts at noon, hence -0.5)."""
    return ms / MILLISECONDS_PER_DAY - 0.5 + JULIAN_1970

def to_days_since_2000(ms: float) -> float:
    return to_julian_date(ms) - JULIAN_2000

def from_julian_date(jd: float) -> int | float:
    """Julian Date -> unix milliseconds, rounded to the nearest millisecond.

    A non-finite Julian Date (e.g. a phase that never happens) comes back
    unchanged as a float.
    """
    ms = (jd + 0.5 - JULIAN_1970) * MILLISECONDS_PER_DAY
    if not math.isfinite(ms):
        return ms
    return _round_half_away(ms)

def _round_half_away(x: float) -> int:
    """Nearest integer; exact .5 ties go away from zero."""
    n = math.floor(abs(x) + 0.5)
    return n if x >= 0.0 else -n


def datetime_to_ms(dt: datetime) -> int:
    """
    datetime -> unix milliseconds. Requires timezone-aware datetime.
    """
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    delta = dt.astimezone(timezone.utc) - _UNIX_EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000

def ms_to_datetime(ms: int) -> datetime:
    """
    unix milliseconds -> timezone-aware datetime in UTC.
    """
    return _UNIX_EPOCH + timedelta(milliseconds=ms)

def start_of_utc_day(ms: int) -> int:
    return ms - ms % MILLISECONDS_PER_DAY
