# -*- coding: utf-8 -*-
# h3geo/api.py

"""
Project: h3geo
Author: Erfan Vaezi
Date: 7/15/2025 (Updated: 10/14/2025)

Purpose
-------
Thin, import-only façade for the usual producer/consumer tasks: (1) build array
rings and polygons from degree inputs, (2) assemble a linked polygon incrementally,
and (3) pull a loop's edges into plain (lat, lon) pairs.

Main Tasks
----------
    1. `geofence_from_degrees` → (N, 2) degrees → Geofence (radians inside).
    2. `polygon_from_degrees` → exterior + holes → GeoPolygon.
    3. `linked_polygon_from_degrees` → rings appended one vertex at a time.
    4. `collect_edges` → list of ((lat, lon), (lat, lon)) edges in the requested unit.

Notes
-----
- Detailed behavior lives in `topology.boundary`, `topology.polygon` and
  `topology.linked`; this module only wires them together.
"""

from typing import List, Sequence, Tuple, Union

from .coords.latlng import AngleUnit, GeoCoord
from .topology.boundary import Geofence
from .topology.iterate import EdgeIterable
from .topology.linked import LinkedGeoPolygon
from .topology.polygon import GeoPolygon

__all__ = [
    "geofence_from_degrees",
    "polygon_from_degrees",
    "linked_polygon_from_degrees",
    "collect_edges",
]

LatLng = Tuple[float, float]


# --------
# Helpers
# --------
def geofence_from_degrees(points) -> Geofence:
    """
    Build a Geofence from (N, 2) [lat, lon] degree rows (CCW, open or closed).
    """
    return Geofence.from_array(points, unit=AngleUnit.DEGREES)


def polygon_from_degrees(exterior, holes: Sequence = ()) -> GeoPolygon:
    """
    Build a GeoPolygon from an exterior ring and optional hole rings, all in degrees.
    """
    return GeoPolygon(
        geofence_from_degrees(exterior),
        tuple(geofence_from_degrees(h) for h in holes),
    )


def linked_polygon_from_degrees(rings: Sequence[Sequence[LatLng]]) -> LinkedGeoPolygon:
    """
    Append each ring as a new loop (first ring = exterior), vertex by vertex.

    Args
    ----
    rings : Sequence[Sequence[(lat, lon)]]
        Degree pairs per ring; no closing duplicate expected.

    Returns
    -------
    LinkedGeoPolygon
        Single polygon with len(rings) loops.
    """
    polygon = LinkedGeoPolygon()
    for ring in rings:
        loop = polygon.add_new_loop()
        for lat, lon in ring:
            loop.add_coord(GeoCoord.from_degrees(lat, lon))
    return polygon


def collect_edges(
    loop: EdgeIterable,
    unit: Union[AngleUnit, str] = AngleUnit.DEGREES,
) -> List[Tuple[LatLng, LatLng]]:
    """
    Drain a fresh cursor over `loop` into ((lat_a, lon_a), (lat_b, lon_b)) pairs.

    Works for any EdgeIterable (CellBoundary, Geofence, LinkedGeoLoop).
    """
    out = [None, None]
    edges = []
    cursor = loop.new_iterate()
    while cursor.step(out):
        a, b = out
        edges.append((a.as_unit(unit).as_tuple(), b.as_unit(unit).as_tuple()))
    return edges
