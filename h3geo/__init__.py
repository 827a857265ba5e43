# -*- coding: utf-8 -*-
# h3geo/__init__.py

"""
Project: h3geo
Author: Erfan Vaezi
Date: 7/18/2025 (Updated: 10/14/2025)

Modules:
--------
- coords:   GeoCoord latitude/longitude value type (radians canonical, degree view),
            plus private scaling/normalization helpers.

- topology: Cell boundary and polygon ring representations:
              * CellBoundary / Geofence: array-backed, immutable, implicitly closed,
              * GeoPolygon / GeoMultiPolygon: exterior ring + holes, and collections,
              * LinkedGeoLoop / LinkedGeoPolygon: forward-linked, append-only,
              * EdgeIterable / EdgeCursor: the one edge-iteration contract for both.

- post:     Matplotlib rendering of rings, driven only by edge iteration.

- config:   Sectioned defaults (coordinate precision, cycle guard) and overrides.

- errors:   GeometryError and its typed subclasses.

- api:      Minimal public facade for common tasks used in main scripts.
              * geofence_from_degrees(points)
              * polygon_from_degrees(exterior, holes=())
              * linked_polygon_from_degrees(rings)
              * collect_edges(loop, unit="deg")

            Usage:
                from h3geo.api import polygon_from_degrees, collect_edges
"""

from .coords import AngleUnit, GeoCoord
from .topology import (
    Edge, EdgeCursor, EdgeIterable,
    CellBoundary, Geofence, GeoPolygon, GeoMultiPolygon,
    LinkedGeoCoord, LinkedGeoLoop, LinkedGeoPolygon,
)
from .config import MAX_CELL_BNDRY_VERTS
from .errors import GeometryError, BoundaryError, TopologyError, SchemaError

__version__ = "0.4.0"

__all__ = [
    "AngleUnit", "GeoCoord",
    "Edge", "EdgeCursor", "EdgeIterable",
    "CellBoundary", "Geofence", "GeoPolygon", "GeoMultiPolygon",
    "LinkedGeoCoord", "LinkedGeoLoop", "LinkedGeoPolygon",
    "MAX_CELL_BNDRY_VERTS",
    "GeometryError", "BoundaryError", "TopologyError", "SchemaError",
]
