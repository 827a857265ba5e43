# -*- coding: utf-8 -*-
# h3geo/topology/boundary.py

"""
Project: h3geo
Author: Erfan Vaezi
Date: 8/31/2025 (Updated: 10/12/2025)

Purpose:
--------
Array-backed closed loops:
   - CellBoundary: a computed cell boundary, at most MAX_CELL_BNDRY_VERTS vertices,
   - Geofence:     an unbounded ring used as a polygon exterior or hole.

Both store vertices in CCW order with implicit closure (no duplicated closing
vertex), are immutable after construction, and implement the edge-iteration
contract with an index cursor.

Notes:
------
   - `num_verts == len(verts)` always; the count is derived, not stored.
   - The zero-value Geofence() is the explicit "no shape" sentinel.
   - Array constructors accept (N, 2) [lat, lon] NumPy arrays; a trailing row equal
     to the first is dropped.
"""

import logging
from dataclasses import dataclass
from typing import MutableSequence, Sequence, Tuple, Union
import numpy as np
from ..config import MAX_CELL_BNDRY_VERTS
from ..coords._num import degs_to_rads, rads_to_degs, normalize_lat_deg, normalize_lon_deg
from ..coords.latlng import AngleUnit, GeoCoord
from ..errors import BoundaryError
from ._validation import _assert_latlng, _strip_closing_duplicate
from .iterate import EdgeCursor, EdgeIterable

logger = logging.getLogger(__name__)


class _ArrayEdgeCursor(EdgeCursor):
    """Index cursor; position starts at -1 so the first step lands on vertex 0."""

    def __init__(self, verts: Sequence[GeoCoord]):
        self._verts = verts
        self._index = -1

    def step(self, out: MutableSequence) -> bool:
        n = len(self._verts)
        if self._index >= n:
            return False
        self._index += 1
        if self._index >= n:
            return False
        out[0] = self._verts[self._index]
        out[1] = self._verts[(self._index + 1) % n]
        return True


class ArrayLoop(EdgeIterable):
    """
    Shared behavior of the array-backed loops. Subclasses are frozen dataclasses
    with a single `verts` field.
    """

    verts: Tuple[GeoCoord, ...]

    def _freeze_verts(self) -> None:
        # frozen dataclass: bypass __setattr__ to coerce lists into tuples
        object.__setattr__(self, "verts", tuple(self.verts))

    @property
    def num_verts(self) -> int:
        return len(self.verts)

    def __len__(self) -> int:
        return len(self.verts)

    def is_zero(self) -> bool:
        return len(self.verts) == 0

    def new_iterate(self) -> EdgeCursor:
        return _ArrayEdgeCursor(self.verts)

    # --------------------
    # Unit views
    # --------------------
    def as_degrees(self):
        """Same loop with every vertex in the degree view."""
        return type(self)(tuple(v.as_degrees() for v in self.verts))

    def as_radians(self):
        """Same loop with every vertex in radians."""
        return type(self)(tuple(v.as_radians() for v in self.verts))

    # --------------------
    # NumPy interop
    # --------------------
    @classmethod
    def from_array(cls, points, unit: Union[AngleUnit, str] = AngleUnit.DEGREES):
        """
        Build a loop from an (N, 2) [lat, lon] array.

        Parameters
        ----------
        points : array-like
            Vertex rows in CCW order; an explicit closing duplicate is dropped.
        unit : AngleUnit
            Unit of `points` (default: degrees). Vertices are stored in radians.

        Raises
        ------
        ValueError
            If `points` is not (N, 2) or contains non-finite values.
        """
        pts = np.asarray(points, dtype=np.float64)
        if pts.size == 0:
            pts = pts.reshape(0, 2)
        _assert_latlng(pts, cls.__name__)
        pts = _strip_closing_duplicate(pts)
        if AngleUnit(unit) == AngleUnit.DEGREES:
            pts = degs_to_rads(pts)
        verts = tuple(GeoCoord.from_radians(lat, lon) for lat, lon in pts)
        logger.debug("[%s] Built from array with %d vertices.", cls.__name__, len(verts))
        return cls(verts)

    def to_array(self, unit: Union[AngleUnit, str] = AngleUnit.RADIANS) -> np.ndarray:
        """
        Return vertices as an (N, 2) float64 [lat, lon] array in `unit`.

        Degree output is normalized like GeoCoord.as_degrees().
        """
        rad = np.array([v.as_radians().as_tuple() for v in self.verts], dtype=np.float64)
        rad = rad.reshape(-1, 2)
        if AngleUnit(unit) == AngleUnit.RADIANS:
            return rad
        deg = rads_to_degs(rad)
        return np.column_stack((normalize_lat_deg(deg[:, 0]), normalize_lon_deg(deg[:, 1])))


@dataclass(frozen=True)
class CellBoundary(ArrayLoop):
    """
    Boundary of a single grid cell.

    Attributes
    ----------
    verts : Tuple[GeoCoord, ...]
        Vertices in CCW order, at most MAX_CELL_BNDRY_VERTS (pentagon: 5 vertices
        plus 5 edge crossings).
    """

    verts: Tuple[GeoCoord, ...] = ()

    def __post_init__(self):
        self._freeze_verts()
        if len(self.verts) > MAX_CELL_BNDRY_VERTS:
            raise BoundaryError(
                "[CellBoundary] Too many vertices for a cell boundary.",
                {"num_verts": len(self.verts), "max": MAX_CELL_BNDRY_VERTS},
            )

    def __str__(self) -> str:
        return "[" + " ".join(str(v) for v in self.verts) + "]"


@dataclass(frozen=True)
class Geofence(ArrayLoop):
    """
    Array-backed ring of arbitrary size (polygon exterior or hole).

    Attributes
    ----------
    verts : Tuple[GeoCoord, ...]
        Vertices in CCW order; empty for the "no shape" sentinel.
    """

    verts: Tuple[GeoCoord, ...] = ()

    def __post_init__(self):
        self._freeze_verts()
