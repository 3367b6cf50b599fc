# reference/coords.py

from __future__ import annotations

import math

from . import _trig
from .elements import TO_RAD

OBLIQUITY_OF_EARTH = 23.4397 * TO_RAD


# ecliptic -> equatorial

def right_ascension(l: float, b: float) -> float:
    return math.atan2(
        _trig.sin(l) * _trig.cos(OBLIQUITY_OF_EARTH) - _trig.tan(b) * _trig.sin(OBLIQUITY_OF_EARTH),
        _trig.cos(l),
    )

def declination(l: float, b: float) -> float:
    return _trig.asin(
        _trig.sin(b) * _trig.cos(OBLIQUITY_OF_EARTH)
        + _trig.cos(b) * _trig.sin(OBLIQUITY_OF_EARTH) * _trig.sin(l)
    )


# equatorial -> horizontal

def sidereal_time(d: float, lw: float) -> float:
    """Local sidereal time (radians); lw is the west longitude in radians."""
    return (280.16 + 360.9856235 * d) * TO_RAD - lw

def azimuth(h: float, phi: float, dec: float) -> float:
    # atan2 gives the azimuth from south; +pi moves the origin
    return math.atan2(
        _trig.sin(h),
        _trig.cos(h) * _trig.sin(phi) - _trig.tan(dec) * _trig.cos(phi),
    ) + math.pi

def altitude(h: float, phi: float, dec: float) -> float:
    return _trig.asin(
        _trig.sin(phi) * _trig.sin(dec) + _trig.cos(phi) * _trig.cos(dec) * _trig.cos(h)
    )

def parallactic_angle(h: float, phi: float, dec: float) -> float:
    return math.atan2(
        _trig.sin(h),
        _trig.tan(phi) * _trig.cos(dec) - _trig.sin(dec) * _trig.cos(h),
    )
