# reference/elements.py

from __future__ import annotations

import math

from . import _trig

TO_RAD = math.pi / 180.0
PERIHELION_OF_EARTH = 102.9372 * TO_RAD


# ------------------------------------------------------------
# Sun
# ------------------------------------------------------------

def solar_mean_anomaly(d: float) -> float:
    """Mean anomaly of the Sun (radians), d = days since J2000."""
    return (357.5291 + 0.98560028 * d) * TO_RAD

def equation_of_center(m: float) -> float:
    return (
        1.9148 * _trig.sin(m)
        + 0.02 * _trig.sin(2.0 * m)
        + 0.0003 * _trig.sin(3.0 * m)
    ) * TO_RAD

def solar_ecliptic_longitude(m: float) -> float:
    return m + equation_of_center(m) + PERIHELION_OF_EARTH + math.pi


# ------------------------------------------------------------
# Moon
# ------------------------------------------------------------

def lunar_mean_anomaly(d: float) -> float:
    return (134.963 + 13.064993 * d) * TO_RAD

def lunar_ecliptic_longitude(d: float) -> float:
    """Mean ecliptic longitude of the Moon (radians)."""
    return (218.316 + 13.176396 * d) * TO_RAD

def lunar_mean_distance_arg(d: float) -> float:
    """Mean distance of the Moon from its ascending node (radians)."""
    return (93.272 + 13.229350 * d) * TO_RAD

def lunar_ecliptic_position(d: float) -> tuple[float, float]:
    """
    Ecliptic (longitude, latitude) of the Moon with the leading
    perturbation terms applied.
    """
    m = lunar_mean_anomaly(d)
    lon = lunar_ecliptic_longitude(d) + 6.289 * TO_RAD * _trig.sin(m)
    lat = 5.128 * TO_RAD * _trig.sin(lunar_mean_distance_arg(d))
    return lon, lat

def lunar_distance_km(m: float) -> float:
    """Earth-Moon distance (km) from the lunar mean anomaly."""
    return 385001.0 - 20905.0 * _trig.cos(m)
