# -*- coding: utf-8 -*-
# h3geo/topology/linked.py

"""
Project: h3geo
Author: Erfan Vaezi
Date: 9/6/2025 (Updated: 10/14/2025)

Purpose:
--------
Forward-linked loops and polygons for boundaries whose final size is unknown when
construction starts (e.g., merging many cell boundaries into one outline).

Structure:
----------
LinkedGeoPolygon ──first──▶ LinkedGeoLoop ──first──▶ LinkedGeoCoord ──next──▶ ... ──▶ None
      │                          │
     next                       next
      ▼                          ▼
LinkedGeoPolygon            LinkedGeoLoop (holes follow the exterior loop)

Notes:
------
   - Links point forward only and every node is owned by whatever links to it, so
     chains terminate at None and never cycle back.
   - `first`/`last` are maintained by the append methods (O(1) append); they are
     read-only properties so the append discipline cannot be bypassed.
   - A loop whose `first` is None is the empty-loop sentinel.
   - Edge cursors special-case wraparound: the edge leaving the last node ends at
     the loop's first node.
"""

import logging
from typing import Iterator, MutableSequence, Optional
from .. import config
from ..coords.latlng import GeoCoord
from ..errors import TopologyError
from .boundary import Geofence
from .iterate import EdgeCursor, EdgeIterable
from .polygon import GeoMultiPolygon, GeoPolygon

logger = logging.getLogger(__name__)

_START = object()


class LinkedGeoCoord:
    """A single vertex in a loop's coord chain."""

    __slots__ = ("vertex", "next")

    def __init__(self, vertex: GeoCoord, next: Optional["LinkedGeoCoord"] = None):
        self.vertex = vertex
        self.next = next

    def __repr__(self) -> str:
        return "LinkedGeoCoord({!r})".format(self.vertex)


class _LinkedEdgeCursor(EdgeCursor):
    """
    Node cursor; starts on a sentinel so the first step lands on `loop.first`.

    When `guard` is set the cursor refuses to produce more edges than the loop has
    appended vertices at that step, which only happens if the coord chain was
    re-linked into a cycle.
    """

    def __init__(self, loop: "LinkedGeoLoop", guard: bool = False):
        self._loop = loop
        self._current = _START
        self._produced = 0
        self._guard = guard

    def step(self, out: MutableSequence) -> bool:
        if self._current is None:
            return False
        if self._current is _START:
            self._current = self._loop.first
        else:
            self._current = self._current.next
        current = self._current
        if current is None:
            return False
        if self._guard and self._produced >= self._loop.count_coords():
            raise TopologyError(
                "[LinkedGeoLoop] Cursor walked past the appended vertex count; coord chain cycles.",
                {"num_coords": self._loop.count_coords()},
            )
        following = current.next if current.next is not None else self._loop.first
        out[0] = current.vertex
        out[1] = following.vertex
        self._produced += 1
        return True


class LinkedGeoLoop(EdgeIterable):
    """
    Incrementally built closed loop.

    Attributes
    ----------
    next : Optional[LinkedGeoLoop]
        Sibling loop in the owning polygon (None when last).
    """

    def __init__(self):
        self._first = None  # type: Optional[LinkedGeoCoord]
        self._last = None   # type: Optional[LinkedGeoCoord]
        self._count = 0
        self._attached = False
        self.next = None    # type: Optional[LinkedGeoLoop]

    @property
    def first(self) -> Optional[LinkedGeoCoord]:
        return self._first

    @property
    def last(self) -> Optional[LinkedGeoCoord]:
        return self._last

    # --------------------
    # Construction
    # --------------------
    def add_coord(self, vertex: GeoCoord) -> LinkedGeoCoord:
        """Append `vertex` after the current last node and return the new node."""
        coord = LinkedGeoCoord(vertex)
        if self._last is None:
            self._first = coord
        else:
            self._last.next = coord
        self._last = coord
        self._count += 1
        return coord

    # --------------------
    # Read access
    # --------------------
    def is_zero(self) -> bool:
        return self._first is None

    def count_coords(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def coords(self) -> Iterator[GeoCoord]:
        """Vertices in append order."""
        node = self._first
        while node is not None:
            yield node.vertex
            node = node.next

    def new_iterate(self) -> EdgeCursor:
        return _LinkedEdgeCursor(self, bool(config.setting("LINKED_CYCLE_GUARD")))

    def to_geofence(self) -> Geofence:
        """Copy the vertices into an array-backed Geofence (same order)."""
        return Geofence(tuple(self.coords()))

    def __repr__(self) -> str:
        return "LinkedGeoLoop(num_coords={})".format(self._count)


class LinkedGeoPolygon:
    """
    Incrementally built polygon: first loop is the exterior ring, later loops are
    holes. Sibling polygons chained through `next` form a linked multipolygon.

    Attributes
    ----------
    next : Optional[LinkedGeoPolygon]
        Sibling polygon (None when last).
    """

    def __init__(self):
        self._first = None  # type: Optional[LinkedGeoLoop]
        self._last = None   # type: Optional[LinkedGeoLoop]
        self.next = None    # type: Optional[LinkedGeoPolygon]

    @property
    def first(self) -> Optional[LinkedGeoLoop]:
        return self._first

    @property
    def last(self) -> Optional[LinkedGeoLoop]:
        return self._last

    # --------------------
    # Construction
    # --------------------
    def add_new_loop(self) -> LinkedGeoLoop:
        """Create an empty loop, append it and return it."""
        return self.add_loop(LinkedGeoLoop())

    def add_loop(self, loop: LinkedGeoLoop) -> LinkedGeoLoop:
        """
        Append an existing, detached loop.

        Raises
        ------
        TopologyError
            If `loop` still links to a sibling or already belongs to a polygon
            (this one or another); either would splice chains together or give
            the loop two owners.
        """
        if loop.next is not None:
            raise TopologyError("[LinkedGeoPolygon] Loop already links to a sibling loop.")
        if loop._attached:
            raise TopologyError("[LinkedGeoPolygon] Loop already belongs to a polygon.",
                                {"num_coords": loop.count_coords()})
        if self._last is None:
            self._first = loop
        else:
            self._last.next = loop
        self._last = loop
        loop._attached = True
        return loop

    def add_new_polygon(self) -> "LinkedGeoPolygon":
        """
        Create a sibling polygon directly after this one and return it.

        Raises
        ------
        TopologyError
            If this polygon already has a sibling.
        """
        if self.next is not None:
            raise TopologyError("[LinkedGeoPolygon] Polygon already has a sibling polygon.")
        self.next = LinkedGeoPolygon()
        logger.debug("[LinkedGeoPolygon] Sibling polygon added.")
        return self.next

    # --------------------
    # Read access
    # --------------------
    def is_zero(self) -> bool:
        return self._first is None

    def loops(self) -> Iterator[LinkedGeoLoop]:
        """Loops in append order (exterior first)."""
        loop = self._first
        while loop is not None:
            yield loop
            loop = loop.next

    def polygons(self) -> Iterator["LinkedGeoPolygon"]:
        """This polygon followed by every sibling."""
        polygon = self
        while polygon is not None:
            yield polygon
            polygon = polygon.next

    def count_loops(self) -> int:
        return sum(1 for _ in self.loops())

    def count_polygons(self) -> int:
        return sum(1 for _ in self.polygons())

    # --------------------
    # Conversions
    # --------------------
    def to_polygon(self) -> GeoPolygon:
        """Array-backed copy of this polygon only (siblings are ignored)."""
        rings = [loop.to_geofence() for loop in self.loops()]
        if not rings:
            return GeoPolygon()
        return GeoPolygon(rings[0], tuple(rings[1:]))

    def to_multipolygon(self) -> GeoMultiPolygon:
        """Array-backed copy of this polygon and all its siblings."""
        multi = GeoMultiPolygon(tuple(p.to_polygon() for p in self.polygons()))
        logger.info(
            "[LinkedGeoPolygon] Converted %d polygon(s) with %d hole(s) in total.",
            multi.num_polygons, sum(p.num_holes for p in multi.polygons),
        )
        return multi

    def __repr__(self) -> str:
        return "LinkedGeoPolygon(num_loops={})".format(self.count_loops())
