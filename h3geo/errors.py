# -*- coding: utf-8 -*-
# h3geo/errors.py

"""
Project: h3geo
Author: Erfan Vaezi
Date: 10/4/2025

Purpose
-------
Typed exceptions for boundary construction, linked-structure assembly and settings
overrides, with compact context-aware messages.

Main Tasks
----------
    1. Define GeometryError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: BoundaryError, TopologyError, SchemaError.

Notes
-----
- Context is optional; long values are truncated for readability.
- Edge iteration never raises on exhaustion; that is a normal "done" signal.
"""

__all__ = [
    "GeometryError",
    "BoundaryError",
    "TopologyError",
    "SchemaError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class GeometryError(Exception):
    """
    Base class for all h3geo errors.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields appended in the string form (e.g., {"num_verts": 11}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self):
        return super().__str__() + _format_context(self.context)


class BoundaryError(GeometryError):
    """
    A cell boundary was built with more vertices than a pentagon can produce.
    """


class TopologyError(GeometryError):
    """
    Linked structure misuse:
      - appending a loop that already carries a sibling chain
      - adding a sibling polygon where one already exists
      - a cursor walking past the number of appended vertices (cycle)
    """


class SchemaError(GeometryError):
    """
    Per-key issues in settings overrides:
      - unknown keys
      - wrong value types
      - out-of-range values
    """
