# -*- coding: utf-8 -*-
# h3geo/config.py

"""
Project: h3geo
Author: Erfan Vaezi
Date: 10/6/2025

Purpose
-------
Sectioned defaults for coordinate formatting, boundary capacity and linked-loop
iteration, with schema-checked user overrides.

Main Tasks
----------
    1. Flatten curated defaults into a single settings dict.
    2. Normalize and validate override keys/values (SchemaError on failure).
    3. Hold the active settings used by GeoCoord formatting and linked cursors.

Notes
-----
- MAX_CELL_BNDRY_VERTS is fixed by the grid geometry (pentagon: 5 vertices plus
  5 edge crossings) and cannot be overridden.
"""

from typing import Any, Dict, Mapping, Optional
from .errors import SchemaError

__all__ = [
    "MAX_CELL_BNDRY_VERTS",
    "build_settings",
    "configure",
    "get_settings",
    "setting",
]

MAX_CELL_BNDRY_VERTS = 10

# -----------------------------
_DEFAULTS_SECTIONS = [
    ("FORMAT", {
        "COORD_PRECISION": 6,
    }),
    ("BOUNDARY", {
        "MAX_CELL_BNDRY_VERTS": MAX_CELL_BNDRY_VERTS,
    }),
    ("ITERATION", {
        "LINKED_CYCLE_GUARD": True,
    }),
]

_READ_ONLY = {"MAX_CELL_BNDRY_VERTS"}


def _flatten_defaults(sections):
    """
    Turn sectioned defaults into a single flat dict (stable order preserved).
    """
    flat = {}  # type: Dict[str, Any]
    for _name, block in sections:
        flat.update(block)
    return flat


_DEFAULTS = _flatten_defaults(_DEFAULTS_SECTIONS)


def _normalize_keys(params: Mapping[str, Any]) -> Dict[str, Any]:
    out = {}
    for k, v in params.items():
        if not isinstance(k, str):
            raise SchemaError("Settings keys must be strings.", {"key": k})
        out[k.strip().upper()] = v
    return out


def _validate(params: Mapping[str, Any]) -> None:
    for key, value in params.items():
        if key not in _DEFAULTS:
            raise SchemaError("Unknown settings key.", {"key": key})
        if key in _READ_ONLY:
            raise SchemaError("Settings key is read-only.", {"key": key})
        if key == "COORD_PRECISION":
            # bool is an int subclass; reject it explicitly
            if isinstance(value, bool) or not isinstance(value, int):
                raise SchemaError("COORD_PRECISION must be an int.", {"value": value})
            if value < 0:
                raise SchemaError("COORD_PRECISION must be >= 0.", {"value": value})
        elif key == "LINKED_CYCLE_GUARD":
            if not isinstance(value, bool):
                raise SchemaError("LINKED_CYCLE_GUARD must be a bool.", {"value": value})


# ---------- Public API ----------
def build_settings(params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge user params over the flattened defaults and return a new settings dict.

    Raises
    ------
    SchemaError
        If a key is unknown/read-only or a value has the wrong type or range.
    """
    settings = dict(_DEFAULTS)
    if params:
        params = _normalize_keys(params)
        _validate(params)
        settings.update(params)
    return settings


_ACTIVE = build_settings()


def get_settings() -> Dict[str, Any]:
    """Return a copy of the active settings."""
    return dict(_ACTIVE)


def configure(params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Replace the active settings with defaults merged with `params`.

    Passing None (or {}) restores the defaults.
    """
    global _ACTIVE
    _ACTIVE = build_settings(params)
    return dict(_ACTIVE)


def setting(key: str) -> Any:
    """Read a single active setting by (case-insensitive) key."""
    return _ACTIVE[key.strip().upper()]
