# -*- coding: utf-8 -*-
# h3geo/topology/__init__.py

"""
Project: h3geo
Author: Erfan Vaezi
Date: 8/29/2025 (Updated: 11/10/2025)

Topology Subfolder:
-------------------
Closed-loop boundary representations and the edge-iteration contract they share.

Modules:
--------
- iterate:     EdgeIterable / EdgeCursor contract and the Edge tuple.

- boundary:    Array-backed loops: CellBoundary (at most 10 vertices) and Geofence,
               with NumPy constructors and unit views.

- polygon:     GeoPolygon (exterior + holes) and GeoMultiPolygon.

- linked:      Forward-linked LinkedGeoCoord / LinkedGeoLoop / LinkedGeoPolygon with
               O(1) append, counters, walkers and conversion to the array forms.

- _validation: Shared (N, 2) [lat, lon] array checks.
"""

from .iterate import Edge, EdgeCursor, EdgeIterable
from .boundary import ArrayLoop, CellBoundary, Geofence
from .polygon import GeoPolygon, GeoMultiPolygon
from .linked import LinkedGeoCoord, LinkedGeoLoop, LinkedGeoPolygon

__all__ = [
    "Edge", "EdgeCursor", "EdgeIterable",
    "ArrayLoop", "CellBoundary", "Geofence",
    "GeoPolygon", "GeoMultiPolygon",
    "LinkedGeoCoord", "LinkedGeoLoop", "LinkedGeoPolygon",
]
