# -*- coding: utf-8 -*-
# h3geo/main.py

"""
End-to-end driver:
  1) Build an array-backed polygon (square exterior + square hole)
  2) Walk every ring with independent edge cursors
  3) Assemble the same shape incrementally as a linked polygon (+ a sibling)
  4) Convert the linked structure back to array form
  5) Quick ring plot
"""

import logging

from h3geo import CellBoundary, GeoCoord
from h3geo.api import polygon_from_degrees, linked_polygon_from_degrees, collect_edges
from h3geo.post.plot_polygon import plot_polygon


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("h3geo")

    # ------------------------------------------------------------------
    # 1) Array-backed polygon (degrees in, radians stored)
    # ------------------------------------------------------------------
    exterior = [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)]
    hole = [(0.25, 0.25), (0.25, 0.75), (0.75, 0.75), (0.75, 0.25)]
    polygon = polygon_from_degrees(exterior, [hole])
    log.info("Polygon: %d exterior vertices, %d hole(s)", polygon.geofence.num_verts, polygon.num_holes)

    # ------------------------------------------------------------------
    # 2) One cursor per ring
    # ------------------------------------------------------------------
    for i, ring in enumerate(polygon.rings()):
        for a, b in ring.edges():
            log.info("ring %d edge: %s -> %s", i, a.as_degrees(), b.as_degrees())

    # ------------------------------------------------------------------
    # 3) Linked polygon, built vertex by vertex, plus a sibling triangle
    # ------------------------------------------------------------------
    linked = linked_polygon_from_degrees([exterior, hole])
    sibling = linked.add_new_polygon()
    tri = sibling.add_new_loop()
    for lat, lon in [(2.0, 2.0), (2.0, 3.0), (3.0, 2.5)]:
        tri.add_coord(GeoCoord.from_degrees(lat, lon))
    log.info("Linked: %d polygon(s), first has %d loop(s)", linked.count_polygons(), linked.count_loops())
    log.info("Triangle edges (deg): %s", collect_edges(tri))

    # ------------------------------------------------------------------
    # 4) Linked -> array
    # ------------------------------------------------------------------
    multi = linked.to_multipolygon()
    log.info("MultiPolygon: %d polygon(s)", multi.num_polygons)

    # Cell boundaries hold at most MAX_CELL_BNDRY_VERTS vertices
    boundary = CellBoundary(tuple(GeoCoord.from_degrees(lat, lon) for lat, lon in exterior))
    log.info("Cell boundary (deg): %s", boundary.as_degrees())

    # ------------------------------------------------------------------
    # 5) Quick plot (optional)
    # ------------------------------------------------------------------
    try:
        plot_polygon(polygon, name="square with hole", show=True, save_path="polygon.png")
    except Exception as e:
        log.warning("Skipping polygon plot: %s", e)
