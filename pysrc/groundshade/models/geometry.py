"""Row geometry and enumerations describing the PV array."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum, IntEnum

from ..errors import ConfigurationError


class RowType(IntEnum):
    """Position of the ground strip relative to the rows around it."""

    INTERIOR = 0
    FIRST = 1
    LAST = 2


class TrackMode(Enum):
    """Tracking modes supported by the bifacial ground model."""

    NOAT = "no_tracking"
    SAXT = "single_axis_tracking"


class ArrayType(str, Enum):
    """Orientation and shading arrangements of a PV array."""

    FIXED_TILTED_PLANE = "Fixed Tilted Plane"
    FIXED_TILTED_PLANE_SEASONAL = "Fixed Tilted Plane Seasonal Adjustment"
    UNLIMITED_ROWS = "Unlimited Rows"
    SINGLE_AXIS_ELEVATION_TRACKING = "Single Axis Elevation Tracking (E-W)"
    SINGLE_AXIS_HORIZONTAL_TRACKING = "Single Axis Horizontal Tracking (N-S)"
    TILT_AND_ROLL_TRACKING = "Tilt and Roll Tracking"
    TWO_AXIS_TRACKING = "Two Axis Tracking"
    AZIMUTH_TRACKING = "Azimuth (Vertical Axis) Tracking"

    @property
    def track_mode(self) -> TrackMode | None:
        """Tracking mode for the bifacial ground model, or None if unsupported."""
        return _BIFACIAL_TRACK_MODES.get(self)


_BIFACIAL_TRACK_MODES = {
    ArrayType.UNLIMITED_ROWS: TrackMode.NOAT,
    ArrayType.SINGLE_AXIS_ELEVATION_TRACKING: TrackMode.SAXT,
    ArrayType.SINGLE_AXIS_HORIZONTAL_TRACKING: TrackMode.SAXT,
}


@dataclass(frozen=True)
class RowGeometry:
    """
    Row geometry normalised to panel slope lengths.

    One panel slope length is the array bandwidth: the sloped width of a
    row. Pitch and clearance are stored already divided by it.

    Attributes:
        tilt: Panel tilt from horizontal (radians).
        azimuth: Panel azimuth, 0 = south, positive west (radians).
        pitch: Row-to-row spacing (panel slope lengths).
        clearance: Height of the panel's lower edge above ground (panel slope lengths).
        bandwidth: Array bandwidth (m).
        transmission_factor: Fraction of beam light passing through a module.
    """

    tilt: float
    azimuth: float
    pitch: float
    clearance: float
    bandwidth: float
    transmission_factor: float = 0.0

    def __post_init__(self):
        if not self.bandwidth > 0:
            raise ConfigurationError("bandwidth", f"must be positive, got {self.bandwidth}")
        if not self.pitch > 0:
            raise ConfigurationError("pitch", f"must be positive, got {self.pitch}")
        if not 0.0 <= self.transmission_factor <= 1.0:
            raise ConfigurationError(
                "transmission_factor", f"must be in [0, 1], got {self.transmission_factor}"
            )
        if not math.isfinite(self.clearance) or self.clearance < 0:
            raise ConfigurationError("clearance", f"must be finite and non-negative, got {self.clearance}")

    @classmethod
    def from_meters(
        cls,
        tilt: float,
        azimuth: float,
        pitch: float,
        clearance: float,
        bandwidth: float,
        transmission_factor: float = 0.0,
    ) -> RowGeometry:
        """
        Build geometry from pitch and clearance given in metres.

        Example:
            >>> geom = RowGeometry.from_meters(0.3, 0.0, pitch=6.0, clearance=0.4, bandwidth=2.0)
            >>> geom.pitch, geom.clearance
            (3.0, 0.2)
        """
        if not bandwidth > 0:
            raise ConfigurationError("bandwidth", f"must be positive, got {bandwidth}")
        return cls(
            tilt=tilt,
            azimuth=azimuth,
            pitch=pitch / bandwidth,
            clearance=clearance / bandwidth,
            bandwidth=bandwidth,
            transmission_factor=transmission_factor,
        )

    def oriented(self, tilt: float, azimuth: float, clearance: float) -> RowGeometry:
        """
        Copy of this geometry with a new panel orientation.

        Args:
            tilt: Panel tilt (radians)
            azimuth: Panel azimuth (radians)
            clearance: Ground clearance in metres (normalised here)
        """
        return replace(self, tilt=tilt, azimuth=azimuth, clearance=clearance / self.bandwidth)

    @property
    def height(self) -> float:
        """Vertical extent of a sloped panel (panel slope lengths)."""
        return math.sin(self.tilt)

    @property
    def base(self) -> float:
        """Horizontal extent of a sloped panel (panel slope lengths)."""
        return math.cos(self.tilt)
