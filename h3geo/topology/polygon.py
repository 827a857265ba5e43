# -*- coding: utf-8 -*-
# h3geo/topology/polygon.py

"""
Project: h3geo
Author: Erfan Vaezi
Date: 9/2/2025

Purpose:
--------
Simplified core of the GeoJSON Polygon / MultiPolygon coordinate definitions built
from array-backed Geofence rings.

Notes:
------
   - No iteration logic of its own: `rings()` exposes the exterior followed by the
     holes, and each ring is walked with its own cursor.
   - Holes are assumed to lie inside the exterior; nothing here checks it.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple
from .boundary import Geofence


@dataclass(frozen=True)
class GeoPolygon:
    """
    Attributes
    ----------
    geofence : Geofence
        Exterior ring.
    holes : Tuple[Geofence, ...]
        Interior rings, in producer order.
    """

    geofence: Geofence = Geofence()
    holes: Tuple[Geofence, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "holes", tuple(self.holes))

    @property
    def num_holes(self) -> int:
        return len(self.holes)

    def rings(self) -> Iterator[Geofence]:
        """Exterior ring first, then each hole."""
        yield self.geofence
        yield from self.holes

    def is_zero(self) -> bool:
        return self.geofence.is_zero() and not self.holes

    def as_degrees(self) -> "GeoPolygon":
        return GeoPolygon(self.geofence.as_degrees(), tuple(h.as_degrees() for h in self.holes))

    def as_radians(self) -> "GeoPolygon":
        return GeoPolygon(self.geofence.as_radians(), tuple(h.as_radians() for h in self.holes))


@dataclass(frozen=True)
class GeoMultiPolygon:
    """
    Ordered polygons; order only matters for deterministic traversal/serialization.
    """

    polygons: Tuple[GeoPolygon, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "polygons", tuple(self.polygons))

    @property
    def num_polygons(self) -> int:
        return len(self.polygons)

    def __iter__(self) -> Iterator[GeoPolygon]:
        return iter(self.polygons)

    def as_degrees(self) -> "GeoMultiPolygon":
        return GeoMultiPolygon(tuple(p.as_degrees() for p in self.polygons))

    def as_radians(self) -> "GeoMultiPolygon":
        return GeoMultiPolygon(tuple(p.as_radians() for p in self.polygons))
