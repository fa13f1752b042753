"""Per-timestep input data."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime as dt

from ..errors import TimestepDataError


@dataclass
class TimestepInput:
    """
    Sun position, panel orientation and measured irradiance for one timestep.

    Attributes:
        datetime: Timestamp of the step. Only used for diagnostics.
        sun_zenith: Sun zenith angle, 0 = overhead (radians).
        sun_azimuth: Sun azimuth, 0 = south, positive west (radians).
        panel_tilt: Panel tilt from horizontal (radians).
        panel_azimuth: Panel azimuth, 0 = south, positive west (radians).
        clearance: Ground clearance of the panel's lower edge (m).
        direct_horizontal: Direct (beam) horizontal irradiance (W/m²).
        diffuse_horizontal: Diffuse horizontal irradiance (W/m²).
    """

    datetime: dt | None
    sun_zenith: float
    sun_azimuth: float
    panel_tilt: float
    panel_azimuth: float
    clearance: float
    direct_horizontal: float
    diffuse_horizontal: float

    def __post_init__(self):
        for name in ("sun_zenith", "sun_azimuth", "panel_tilt", "panel_azimuth", "clearance"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise TimestepDataError(name, value, "must be finite")
        for name in ("direct_horizontal", "diffuse_horizontal"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise TimestepDataError(name, value, "must be finite")
            if value < 0:
                raise TimestepDataError(name, value, "irradiance cannot be negative")
        if self.clearance < 0:
            raise TimestepDataError("clearance", self.clearance, "must be non-negative")
