# -*- coding: utf-8 -*-
# h3geo/post/plot_polygon.py

"""
Project: h3geo
Author: Erfan Vaezi
Date: 7/14/2025 (Updated: 10/14/2025)

Purpose:
--------
Plotting utilities for polygon rings using matplotlib. Each ring is drawn edge by
edge from a fresh cursor, so Geofence, CellBoundary and LinkedGeoLoop rings are
rendered through the same code path (exterior solid, holes dashed).
"""

import logging
from typing import Iterable, List, Optional, Tuple, Union
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from ..topology.iterate import EdgeIterable
from ..topology.linked import LinkedGeoPolygon
from ..topology.polygon import GeoPolygon

logger = logging.getLogger(__name__)


def _ring_xy(ring: EdgeIterable) -> np.ndarray:
    """
    Explicitly closed (M, 2) [lon, lat] degree array built from the ring's edges.

    An empty ring gives an empty (0, 2) array.
    """
    pts = []  # type: List[Tuple[float, float]]
    out = [None, None]
    cursor = ring.new_iterate()
    while cursor.step(out):
        a = out[0].as_degrees()
        pts.append((a.lon, a.lat))
        last_b = out[1].as_degrees()
    if pts:
        pts.append((last_b.lon, last_b.lat))
    return np.asarray(pts, dtype=np.float64).reshape(-1, 2)


def plot_rings(rings: Iterable[EdgeIterable],
               *,
               name: str = "polygon",
               show: bool = True,
               save_path: Optional[str] = None,
               ax: Optional[Axes] = None) -> Axes:
    """
        Plot closed rings; the first one is treated as the exterior.

        Parameters
        ----------
        rings : Iterable[EdgeIterable]
            Exterior followed by holes.
        name : str
            Title label for the figure.
        show : bool
            If True and we created the figure, display it.
        save_path : Optional[str]
            If given, save the figure to this path.
        ax : Optional[matplotlib.axes.Axes]
            Existing Axes to draw on; if None, a figure is created.

        Returns
        -------
        matplotlib.axes.Axes
            The Axes that was drawn on.
        """
    created_fig = False
    if ax is None:
        plt.figure(figsize=(6, 6))
        ax = plt.gca()
        created_fig = True

    n_drawn = 0
    n_holes = 0
    for i, ring in enumerate(rings):
        xy = _ring_xy(ring)
        if xy.shape[0] == 0:
            continue
        if i == 0:
            ax.plot(xy[:, 0], xy[:, 1], 'k-', lw=1.5, label="exterior")
        else:
            ax.plot(xy[:, 0], xy[:, 1], 'r--', lw=1.2, label="hole" if n_holes == 0 else None)
            n_holes += 1
        n_drawn += 1

    ax.set_aspect('equal', adjustable='box')
    ax.set_title("Polygon: {}".format(name))
    ax.set_xlabel("lon [deg]")
    ax.set_ylabel("lat [deg]")
    ax.grid(True)
    if n_drawn:
        ax.legend()

    if save_path:
        ax.figure.savefig(save_path, dpi=300)
        logger.info("[plot_rings] Plot saved to: %s", save_path)
    if show and created_fig:
        plt.show()
    elif created_fig:
        plt.close(ax.figure)
    return ax


def plot_polygon(polygon: Union[GeoPolygon, LinkedGeoPolygon], **kwargs) -> Axes:
    """
    Plot a GeoPolygon (exterior + holes) or a LinkedGeoPolygon (loops in order).

    Keyword arguments are forwarded to `plot_rings`.
    """
    if isinstance(polygon, LinkedGeoPolygon):
        rings = polygon.loops()
    elif isinstance(polygon, GeoPolygon):
        rings = polygon.rings()
    else:
        raise TypeError("[plot_polygon] Expected GeoPolygon or LinkedGeoPolygon, got {}".format(
            type(polygon).__name__))
    return plot_rings(rings, **kwargs)
