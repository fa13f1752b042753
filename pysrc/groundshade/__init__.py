"""groundshade - Ground irradiance beneath rows of bifacial PV modules.

Computes, per timestep, the irradiance reaching the ground between module
rows from the diffuse sky view of each ground segment and the direct-beam
shadows cast by neighbouring rows. Interior rows, the ground in front of
the first row and the ground behind the last row are modelled separately.

Quick start::

    import math
    from datetime import datetime

    import groundshade

    config = groundshade.GroundShadingConfig(
        plane_tilt=17.2, collector_bandwidth=2.0, pitch=6.0, ground_clearance=0.4
    )
    engine = groundshade.GroundShading(config)
    result = engine.calculate(
        groundshade.TimestepInput(
            datetime=datetime(2025, 6, 21, 12, 0),
            sun_zenith=0.5,
            sun_azimuth=0.0,
            panel_tilt=math.radians(17.2),
            panel_azimuth=0.0,
            clearance=0.4,
            direct_horizontal=800.0,
            diffuse_horizontal=100.0,
        )
    )
    print(result.irradiance.mid)
"""

from importlib.metadata import PackageNotFoundError, version

# Version: single source of truth is pyproject.toml
try:
    __version__ = version("bifacial-groundshade")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"  # Fallback for source checkouts without metadata

from .bundles import GroundIrradianceBundle, ShadowBundle, ShadowIntervals, SkyViewBundle  # noqa: E402
from .components.beam_shadow import compute_beam_shadow  # noqa: E402
from .components.irradiance import combine_ground_irradiance  # noqa: E402
from .components.sky_view import compute_sky_view_factors, sky_view_in_direction  # noqa: E402
from .config import load_params  # noqa: E402
from .diagnostics import ModelDump  # noqa: E402
from .errors import (  # noqa: E402
    ConfigurationError,
    GroundShadingError,
    ShadingGeometryError,
    TimestepDataError,
)
from .ground_shading import GroundShading  # noqa: E402
from .models import (  # noqa: E402
    ArrayType,
    GroundShadingConfig,
    GroundShadingResult,
    GroundShadingTimeseries,
    RowGeometry,
    RowType,
    TimestepInput,
    TrackMode,
)
from .physics.radiation import get_profile_angle, get_view_factor  # noqa: E402
from .timeseries import calculate_timeseries  # noqa: E402

__all__ = [
    # Engine
    "GroundShading",
    "calculate_timeseries",
    # Models
    "ArrayType",
    "GroundShadingConfig",
    "GroundShadingResult",
    "GroundShadingTimeseries",
    "RowGeometry",
    "RowType",
    "TimestepInput",
    "TrackMode",
    # Components
    "compute_sky_view_factors",
    "sky_view_in_direction",
    "compute_beam_shadow",
    "combine_ground_irradiance",
    # Bundles
    "SkyViewBundle",
    "ShadowBundle",
    "ShadowIntervals",
    "GroundIrradianceBundle",
    # Radiation geometry
    "get_view_factor",
    "get_profile_angle",
    # Configuration and diagnostics
    "load_params",
    "ModelDump",
    # Errors
    "GroundShadingError",
    "ConfigurationError",
    "ShadingGeometryError",
    "TimestepDataError",
]
