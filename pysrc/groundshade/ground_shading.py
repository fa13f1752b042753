"""
Ground shading timestep controller.

Runs the configuration-time and per-timestep stages of the bifacial
ground model:

1. Configuration: validate settings, normalise the row geometry and, for
   fixed-tilt arrays, compute the sky view factors once.
2. Every timestep: recompute sky view factors for trackers (their tilt and
   clearance change), classify beam shadow, combine into ground irradiance.

Each timestep depends only on its own inputs, so steps can be computed in
any order once the engine is constructed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from .components.beam_shadow import ProfileAngleFn, compute_beam_shadow
from .components.irradiance import combine_ground_irradiance
from .components.sky_view import ViewFactorFn, compute_sky_view_factors
from .groundshade_logging import get_logger
from .models.geometry import TrackMode
from .models.results import GroundShadingResult
from .physics.radiation import get_profile_angle, get_view_factor

if TYPE_CHECKING:
    from .bundles import SkyViewBundle
    from .diagnostics import ModelDump
    from .models.config import GroundShadingConfig
    from .models.geometry import RowGeometry
    from .models.timestep import TimestepInput

logger = get_logger(__name__)


class GroundShading:
    """
    Irradiance on the ground beneath rows of bifacial PV modules.

    Args:
        config: Validated on construction; invalid settings raise
            ConfigurationError before any timestep is computed.
        view_factor: View factor of an angular sky span (beta1, beta2).
        profile_angle: Sun profile angle (zenith, azimuth, panel_azimuth).
        model_dump: Optional diagnostics writer called after every timestep.

    Example:
        >>> engine = GroundShading(GroundShadingConfig(plane_tilt=17.2, pitch=6.0))
        >>> result = engine.calculate(timestep)
        >>> result.irradiance.mid  # W/m² per interior ground segment
    """

    def __init__(
        self,
        config: GroundShadingConfig,
        view_factor: ViewFactorFn = get_view_factor,
        profile_angle: ProfileAngleFn = get_profile_angle,
        model_dump: ModelDump | None = None,
    ):
        self.track_mode = config.validate()
        self.config = config
        self.n_segments = config.n_segments
        self.geometry = config.to_row_geometry()
        self._view_factor = view_factor
        self._profile_angle = profile_angle
        self._model_dump = model_dump
        self._static_sky_view: SkyViewBundle | None = None

        logger.info(
            f"Ground shading configured: {config.array_type.value} ({self.track_mode.name}), "
            f"pitch={self.geometry.pitch:.3f}, bandwidth={self.geometry.bandwidth:.3f} m, "
            f"{self.n_segments} ground segments"
        )

        # Sky view factors stay constant for fixed tilt, so compute them once here
        if self.track_mode == TrackMode.NOAT:
            self._static_sky_view = _freeze(compute_sky_view_factors(self.geometry, self.n_segments, view_factor))
            logger.info(f"Static sky view factors computed (mean interior {self._static_sky_view.mid.mean():.4f})")

    @property
    def is_tracking(self) -> bool:
        return self.track_mode != TrackMode.NOAT

    @property
    def static_sky_view(self) -> SkyViewBundle | None:
        """Configuration-time sky view factors (fixed tilt only)."""
        return self._static_sky_view

    def geometry_for(self, timestep: TimestepInput) -> RowGeometry:
        """Row geometry with the panel orientation of one timestep."""
        return self.geometry.oriented(timestep.panel_tilt, timestep.panel_azimuth, timestep.clearance)

    def sky_view_for(self, geometry: RowGeometry) -> SkyViewBundle:
        """Sky view factors in effect for a timestep with the given geometry."""
        if self._static_sky_view is not None:
            return self._static_sky_view
        return compute_sky_view_factors(geometry, self.n_segments, self._view_factor)

    def calculate(self, timestep: TimestepInput) -> GroundShadingResult:
        """
        Compute ground irradiance for one timestep.

        Args:
            timestep: Sun position, panel orientation and measured irradiance.

        Returns:
            GroundShadingResult with sky view factors, shade flags and
            irradiance for interior, first-row and last-row ground.

        Raises:
            ShadingGeometryError: If the shadow cannot be placed consistently
                in the row-to-row span.
        """
        geometry = self.geometry_for(timestep)
        sky_view = self.sky_view_for(geometry)

        shadow = compute_beam_shadow(
            timestep.sun_zenith,
            timestep.sun_azimuth,
            geometry,
            self.n_segments,
            self._profile_angle,
        )

        irradiance = combine_ground_irradiance(
            sky_view,
            shadow,
            timestep.direct_horizontal,
            timestep.diffuse_horizontal,
            geometry.transmission_factor,
        )

        result = GroundShadingResult(
            datetime=timestep.datetime,
            geometry=geometry,
            sky_view=sky_view,
            shadow=shadow,
            irradiance=irradiance,
        )

        if self._model_dump is not None:
            self._model_dump.write(result)

        return result


def _freeze(bundle: SkyViewBundle) -> SkyViewBundle:
    """Mark every array of a bundle read-only."""
    for value in vars(bundle).values():
        if isinstance(value, np.ndarray):
            value.flags.writeable = False
    return bundle
