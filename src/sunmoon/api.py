from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Union

from .core.registry import PhaseTable
from .core.time import datetime_to_ms
from .core.types import Illumination, MoonPosition, MoonTimes, PhaseLike, Position
from .reference import lunar, solar

Instant = Union[int, datetime]  # unix milliseconds or tz-aware datetime

_table: Optional[PhaseTable] = None

def set_table(table: PhaseTable) -> None:
    global _table
    _table = table

def _tbl() -> PhaseTable:
    global _table
    if _table is None:
        _table = PhaseTable()
    return _table

def _ms(t: Instant) -> int:
    if isinstance(t, datetime):
        return datetime_to_ms(t)
    return t

# ============================================================
# Positions
# ============================================================

def sun_position(t: Instant, lat: float, lon: float) -> Position:
    return solar.sun_position(_ms(t), lat, lon)

def moon_position(t: Instant, lat: float, lon: float) -> MoonPosition:
    """Moon azimuth/altitude (altitude corrected for refraction), distance and parallactic angle."""
    return lunar.moon_position(_ms(t), lat, lon)

def moon_illumination(t: Instant) -> Illumination:
    return lunar.moon_illumination(_ms(t))

# ============================================================
# Times
# ============================================================

def time_at_phase(t: Instant, phase: PhaseLike, lat: float, lon: float, height: float = 0.0) -> int | float:
    """Unix ms of `phase` on the day nearest to t; NaN when it does not occur there."""
    return solar.time_at_phase(_ms(t), phase, lat, lon, height)

def time_at(t: Instant, name: str, lat: float, lon: float, height: float = 0.0) -> int | float:
    """Like time_at_phase, with the phase looked up by name in the phase table."""
    return time_at_phase(t, _tbl().phase(name), lat, lon, height)

def sun_times(t: Instant, lat: float, lon: float, height: float = 0.0, *, table: Optional[PhaseTable] = None) -> Dict[str, int | float]:
    tbl = table if table is not None else _tbl()
    return solar.sun_times(_ms(t), lat, lon, tbl.rows(), height)

def moon_times(t: Instant, lat: float, lon: float, *, start_of_day: bool = True) -> MoonTimes:
    return lunar.moon_times(_ms(t), lat, lon, start_of_day=start_of_day)

# ============================================================
# Phase table
# ============================================================

def add_time(angle_deg: float, rise_name: str, set_name: str, *, overwrite: bool = False) -> None:
    """Add a custom sun time (e.g. blue hour at -4 deg) to the default table."""
    _tbl().add_time(angle_deg, rise_name, set_name, overwrite=overwrite)

def list_times() -> List[str]:
    return _tbl().names()
