from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

@dataclass(frozen=True)
class Position:
    azimuth: float   # radians, south-based azimuth shifted by pi
    altitude: float  # radians above the horizon

@dataclass(frozen=True)
class MoonPosition(Position):
    distance_km: float = 0.0
    parallactic_angle: float = 0.0

@dataclass(frozen=True)
class EquatorialCoords:
    right_ascension: float
    declination: float

@dataclass(frozen=True)
class Illumination:
    fraction: float  # illuminated fraction of the disc, 0..1
    phase: float     # 0 new, 0.25 first quarter, 0.5 full, 0.75 last quarter
    angle: float     # midpoint angle of the bright limb (radians)

@dataclass(frozen=True)
class MoonTimes:
    rise: Optional[int] = None
    set: Optional[int] = None
    always_up: bool = False
    always_down: bool = False


class SunPhase(Enum):
    """Named crossings of the Sun's centre through a fixed altitude.

    Each member's value is ``(angle_deg, is_rise)``.
    """
    SUNRISE = (-0.833, True)
    SUNSET = (-0.833, False)
    SUNRISE_END = (-0.5, True)
    SUNSET_START = (-0.5, False)
    DAWN = (-6.0, True)
    DUSK = (-6.0, False)
    NAUTICAL_DAWN = (-12.0, True)
    NAUTICAL_DUSK = (-12.0, False)
    NIGHT_END = (-18.0, True)
    NIGHT = (-18.0, False)
    GOLDEN_HOUR_END = (6.0, True)
    GOLDEN_HOUR = (6.0, False)

    @property
    def angle_deg(self) -> float:
        return self.value[0]

    @property
    def is_rise(self) -> bool:
        return self.value[1]

    @staticmethod
    def custom(angle_deg: float, is_rise: bool) -> "CustomSunPhase":
        return CustomSunPhase(float(angle_deg), bool(is_rise))

@dataclass(frozen=True)
class CustomSunPhase:
    """Caller-defined phase, e.g. the blue hour at -4 deg."""
    angle_deg: float
    is_rise: bool

PhaseLike = Union[SunPhase, CustomSunPhase]
