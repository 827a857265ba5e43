# -*- coding: utf-8 -*-
# h3geo/coords/latlng.py

"""
Project: h3geo
Author: Erfan Vaezi
Date: 7/9/2025 (Updated: 10/6/2025)

Purpose:
--------
Immutable latitude/longitude value type tagged by angular unit. Radians are the
canonical internal unit; degrees are the external-facing view.

Pipeline:
---------
from_degrees(lat, lon) → scale by pi/180 → GeoCoord(unit=RADIANS)
as_degrees()           → scale by 180/pi → wrap lon into (-180, 180], lat into [-90, 90]
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
from ._num import degs_to_rads, rads_to_degs, normalize_lat_deg, normalize_lon_deg
from .. import config


class AngleUnit(str, Enum):
    RADIANS = "rad"
    DEGREES = "deg"


@dataclass(frozen=True)
class GeoCoord:
    """
    Latitude/longitude pair.

    Attributes
    ----------
    lat : float
        Latitude in `unit`.
    lon : float
        Longitude in `unit`.
    unit : AngleUnit
        RADIANS (canonical) or DEGREES (view produced by `as_degrees`).

    Notes
    -----
    - Converting units returns a new value; instances are never mutated.
    - Construction performs no validation.
    """

    lat: float
    lon: float
    unit: AngleUnit = AngleUnit.RADIANS

    # --------------------
    # Constructors
    # --------------------
    @classmethod
    def from_degrees(cls, lat: float, lon: float) -> "GeoCoord":
        """Build a radians-tagged coordinate from degree inputs."""
        return cls(degs_to_rads(float(lat)), degs_to_rads(float(lon)), AngleUnit.RADIANS)

    @classmethod
    def from_radians(cls, lat: float, lon: float) -> "GeoCoord":
        """Store radian inputs as-is."""
        return cls(float(lat), float(lon), AngleUnit.RADIANS)

    # --------------------
    # Unit views
    # --------------------
    def as_degrees(self) -> "GeoCoord":
        """
        Degree view: longitude wrapped into (-180, 180], latitude kept in [-90, 90].

        A degrees-tagged value is only re-normalized, never scaled twice.
        """
        if self.unit == AngleUnit.DEGREES:
            lat, lon = self.lat, self.lon
        else:
            lat, lon = rads_to_degs(self.lat), rads_to_degs(self.lon)
        return GeoCoord(normalize_lat_deg(lat), normalize_lon_deg(lon), AngleUnit.DEGREES)

    def as_radians(self) -> "GeoCoord":
        """Radian view (identity on radians-tagged values)."""
        if self.unit == AngleUnit.RADIANS:
            return self
        return GeoCoord(degs_to_rads(self.lat), degs_to_rads(self.lon), AngleUnit.RADIANS)

    def as_unit(self, unit: AngleUnit) -> "GeoCoord":
        return self.as_degrees() if AngleUnit(unit) == AngleUnit.DEGREES else self.as_radians()

    def as_tuple(self) -> Tuple[float, float]:
        """(lat, lon) in the current unit."""
        return (self.lat, self.lon)

    # --------------------
    # Formatting
    # --------------------
    def format(self, precision: Optional[int] = None) -> str:
        """
        "lat,lon" in the current unit with fixed decimals.

        `precision` defaults to the FORMAT.COORD_PRECISION setting (6); negative
        values are clamped to 0.
        """
        if precision is None:
            precision = config.setting("COORD_PRECISION")
        return "{0:.{p}f},{1:.{p}f}".format(self.lat, self.lon, p=max(0, int(precision)))

    def __str__(self) -> str:
        return self.format()
