"""Data models for ground shading calculations.

Modules
-------
geometry
    ``RowGeometry`` plus the ``RowType``, ``TrackMode`` and ``ArrayType`` enums.
config
    ``GroundShadingConfig`` - configuration-time settings.
timestep
    ``TimestepInput`` - sun position, panel orientation and irradiance.
results
    ``GroundShadingResult`` and ``GroundShadingTimeseries``.
"""

from .config import GroundShadingConfig
from .geometry import ArrayType, RowGeometry, RowType, TrackMode
from .results import GroundShadingResult, GroundShadingTimeseries
from .timestep import TimestepInput

__all__ = [
    # Geometry
    "ArrayType",
    "RowGeometry",
    "RowType",
    "TrackMode",
    # Configuration
    "GroundShadingConfig",
    # Inputs
    "TimestepInput",
    # Results
    "GroundShadingResult",
    "GroundShadingTimeseries",
]
