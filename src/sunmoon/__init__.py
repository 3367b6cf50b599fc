"""sunmoon public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    sun_position,
    moon_position,
    moon_illumination,
    time_at_phase,
    time_at,
    sun_times,
    moon_times,
    add_time,
    list_times,
)
from .core.errors import SunmoonError, UnknownPhaseError
from .core.registry import PhaseTable
from .core.time import (
    to_julian_date,
    to_days_since_2000,
    from_julian_date,
    datetime_to_ms,
    ms_to_datetime,
)
from .core.types import (
    CustomSunPhase,
    Illumination,
    MoonPosition,
    MoonTimes,
    Position,
    SunPhase,
)

__all__ = [
    "sun_position",
    "moon_position",
    "moon_illumination",
    "time_at_phase",
    "time_at",
    "sun_times",
    "moon_times",
    "add_time",
    "list_times",
    "SunmoonError",
    "UnknownPhaseError",
    "PhaseTable",
    "to_julian_date",
    "to_days_since_2000",
    "from_julian_date",
    "datetime_to_ms",
    "ms_to_datetime",
    "CustomSunPhase",
    "Illumination",
    "MoonPosition",
    "MoonTimes",
    "Position",
    "SunPhase",
]
