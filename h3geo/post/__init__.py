# -*- coding: utf-8 -*-
# h3geo/post/__init__.py

"""
Project: h3geo
Author: Erfan Vaezi
Date: 8/24/2025

Post Subfolder:
---------------
Rendering consumers of the topology package. Everything here reads rings through
the edge-iteration contract only, so array and linked shapes draw identically.

Modules:
--------
- plot_polygon: plot_rings / plot_polygon (matplotlib, lon on x, lat on y, degrees).
"""

__all__ = ["plot_polygon"]
