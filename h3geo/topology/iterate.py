# -*- coding: utf-8 -*-
# h3geo/topology/iterate.py

"""
Project: h3geo
Author: Erfan Vaezi
Date: 8/31/2025

Purpose:
--------
The edge-iteration contract shared by array-backed loops (CellBoundary, Geofence)
and linked loops (LinkedGeoLoop):
   - `EdgeIterable.new_iterate()` hands out a fresh, independent `EdgeCursor`,
   - `EdgeCursor.step(out)` writes the next edge into `out[0]`, `out[1]` and returns
     True, or returns False (without writing) once every edge was produced,
   - a cursor is also a plain Python iterator over `Edge(a, b)` tuples.

Notes:
------
   - Cursor state lives in the cursor, never in the loop; many cursors may walk the
     same loop in any interleaving.
   - Exhaustion is sticky: a finished cursor keeps returning False.
   - A loop with n vertices yields exactly n edges, the last one wrapping back to
     the first vertex. n = 0 is "done" on the first step.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, MutableSequence, NamedTuple
from ..coords.latlng import GeoCoord


class Edge(NamedTuple):
    """Ordered pair of adjacent loop vertices."""
    a: GeoCoord
    b: GeoCoord


class EdgeCursor(ABC):
    """
    Pull-based, non-restartable cursor over the edges of one loop.
    """

    @abstractmethod
    def step(self, out: MutableSequence) -> bool:
        """
        Advance to the next edge.

        Parameters
        ----------
        out : MutableSequence
            Caller-owned slots; on success out[0] = first endpoint and
            out[1] = second endpoint. Untouched when the cursor is done.

        Returns
        -------
        bool
            True if an edge was written, False once the loop is exhausted.
        """

    def __iter__(self) -> "EdgeCursor":
        return self

    def __next__(self) -> Edge:
        out = [None, None]
        if not self.step(out):
            raise StopIteration
        return Edge(out[0], out[1])


class EdgeIterable(ABC):
    """
    Capability implemented by every closed loop representation.

    Consumers program against this contract and never against the storage layout.
    """

    @abstractmethod
    def new_iterate(self) -> EdgeCursor:
        """Return a fresh cursor positioned before the first edge."""

    @abstractmethod
    def is_zero(self) -> bool:
        """True for the empty-loop sentinel (no vertices)."""

    def edges(self) -> Iterator[Edge]:
        """Iterate the loop's edges with a fresh cursor."""
        return iter(self.new_iterate())

    def edge_list(self) -> List[Edge]:
        return list(self.new_iterate())
