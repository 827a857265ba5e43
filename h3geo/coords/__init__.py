# -*- coding: utf-8 -*-
# h3geo/coords/__init__.py

"""
Project: h3geo
Author: Erfan Vaezi
Date: 8/29/2025

Coords Subfolder:
-----------------
Geographic coordinate value type and the pure angular helpers behind it.

Modules:
--------
- latlng:  AngleUnit tag and the immutable GeoCoord (from_degrees, from_radians,
           as_degrees, as_radians, "lat,lon" formatting).

- _num:    Degree/radian scaling and symmetric-range normalization shared by
           GeoCoord and the NumPy array constructors in topology.
"""

from .latlng import AngleUnit, GeoCoord

__all__ = ["AngleUnit", "GeoCoord"]
