"""
sunmoon.reference._trig
-----------------------
Domain-total versions of the math functions whose arguments can leave their
domain for physically meaningless inputs (latitude beyond the poles, a sun
phase that never occurs, negative or infinite observer height). They return
NaN where ``math`` would raise, so the formula chain stays a total function.

``math.sin``/``cos``/``tan`` raise on +-inf, hence the wrappers below.
"""

from __future__ import annotations
import math


def sin(x: float) -> float:
    if math.isfinite(x):
        return math.sin(x)
    return math.nan

def cos(x: float) -> float:
    if math.isfinite(x):
        return math.cos(x)
    return math.nan

def tan(x: float) -> float:
    if math.isfinite(x):
        return math.tan(x)
    return math.nan

def asin(x: float) -> float:
    if -1.0 <= x <= 1.0:
        return math.asin(x)
    return math.nan

def acos(x: float) -> float:
    if -1.0 <= x <= 1.0:
        return math.acos(x)
    return math.nan

def sqrt(x: float) -> float:
    if x >= 0.0:
        return math.sqrt(x)
    return math.nan
