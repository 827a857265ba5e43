# -*- coding: utf-8 -*-
# h3geo/topology/_validation.py

"""
Project: h3geo
Author: Erfan Vaezi
Date: 11/10/2025

Purpose:
--------
Centralized validation for NumPy vertex arrays handed to the array-backed loop
constructors, so Geofence and CellBoundary report malformed input the same way.

Main Tasks:
   1. Validate (N, 2) [lat, lon] array structure and finiteness
   2. Strip an explicit closing duplicate (loops are implicitly closed)
"""

from typing import Optional
import numpy as np


def _assert_latlng(points: Optional[np.ndarray], owner: str, check_finite: bool = True) -> None:
    """
    Validate that points array is (N, 2) with optional finite value checking.

    Parameters
    ----------
    points : Optional[np.ndarray]
        [lat, lon] rows to validate; N may be 0.
    owner : str
        Component name used as the message prefix (e.g., "Geofence").
    check_finite : bool, optional
        If True, check for finite values (no NaN/Inf), by default True

    Raises
    ------
    ValueError
        If points array fails validation checks
    """
    if points is None:
        raise ValueError(f"[{owner}] No vertices provided (points is None).")

    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"[{owner}] Expected (N, 2) [lat, lon] array, got shape {points.shape}.")

    if check_finite and not np.isfinite(points).all():
        bad_indices = np.argwhere(~np.isfinite(points))
        raise ValueError(f"[{owner}] Non-finite coordinates detected at indices: {bad_indices.tolist()}")


def _strip_closing_duplicate(points: np.ndarray, tol: float = 0.0) -> np.ndarray:
    """
    Drop a trailing row equal to the first (within `tol`); loops store no closing vertex.
    """
    if points.shape[0] >= 2 and np.allclose(points[0], points[-1], atol=tol, rtol=0.0):
        return points[:-1]
    return points
