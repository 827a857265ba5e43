# -*- coding: utf-8 -*-
# h3geo/coords/_num.py

"""
Project: h3geo
Author: Erfan Vaezi
Date: 8/21/2025

Purpose:
--------
Private numerical utilities used by the coordinate types.

Main Tasks:
-----------
    1. Linear degree <-> radian scaling (pi/180).
    2. One symmetric-range normalization routine, parameterized per axis
       (longitude: (-180, 180], latitude: [-90, 90]).

Notes:
------
- Every function accepts Python floats or NumPy arrays (elementwise).
- No logging, no validation: these are total functions.
"""

import math
import numpy as np

_DEG_PER_RAD = 180.0 / math.pi
_RAD_PER_DEG = math.pi / 180.0

LON_RANGE_DEG = (-180.0, 180.0)
LAT_RANGE_DEG = (-90.0, 90.0)


def degs_to_rads(degrees):
    """Convert degrees to radians."""
    return degrees * _RAD_PER_DEG


def rads_to_degs(radians):
    """Convert radians to degrees."""
    return radians * _DEG_PER_RAD


def normalize_degree(value, lo: float, hi: float, inclusive_lo: bool = False):
    """
    Wrap `value` into the symmetric range (lo, hi] (or [lo, hi] if `inclusive_lo`).

    Values already inside the range are returned unchanged; anything else is shifted
    by whole multiples of (hi - lo) so that it lands in (lo, hi].
    Non-finite input (inf, NaN) gives NaN on both the scalar and the array path.

    Examples
    --------
    normalize_degree(190, -180, 180)                    -> -170
    normalize_degree(180, -180, 180)                    ->  180
    normalize_degree(-180, -180, 180)                   ->  180
    normalize_degree(95, -90, 90, inclusive_lo=True)    ->  -85
    normalize_degree(-90, -90, 90, inclusive_lo=True)   ->  -90
    """
    span = hi - lo
    if isinstance(value, np.ndarray):
        wrapped = hi - np.mod(hi - value, span)
        inside = (value <= hi) & ((value >= lo) if inclusive_lo else (value > lo))
        return np.where(inside, value, wrapped)
    if not math.isfinite(value):
        return value - value
    inside = (lo <= value <= hi) if inclusive_lo else (lo < value <= hi)
    if inside:
        return value
    return hi - math.fmod(math.fmod(hi - value, span) + span, span)


def normalize_lon_deg(value):
    """Longitude in degrees wrapped into (-180, 180]."""
    return normalize_degree(value, *LON_RANGE_DEG)


def normalize_lat_deg(value):
    """Latitude in degrees kept in [-90, 90] (out-of-range values wrapped)."""
    return normalize_degree(value, *LAT_RANGE_DEG, inclusive_lo=True)
