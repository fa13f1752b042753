"""Result data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime as dt
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from ..bundles import GroundIrradianceBundle, ShadowBundle, SkyViewBundle
    from .geometry import RowGeometry


@dataclass
class GroundShadingResult:
    """
    Results of one ground shading timestep.

    Attributes:
        datetime: Timestamp of the step (None if not supplied).
        geometry: Row geometry the step was computed with.
        sky_view: Sky view factors in effect for the step.
        shadow: Beam shade flags.
        irradiance: Combined ground irradiance (W/m²).
    """

    datetime: dt | None
    geometry: RowGeometry
    sky_view: SkyViewBundle
    shadow: ShadowBundle
    irradiance: GroundIrradianceBundle


@dataclass
class GroundShadingTimeseries:
    """
    Stacked results of a time series run.

    Every array has shape (n_timesteps, n_segments).

    Attributes:
        datetimes: Timestamps in input order.
        mid_irradiance: Interior-row ground irradiance (W/m²).
        first_irradiance: Ground irradiance in front of the first row (W/m²).
        last_irradiance: Ground irradiance behind the last row (W/m²).
        mid_shade: Interior-row shade flags.
        first_shade: First-row shade flags.
        last_shade: Last-row shade flags.
        mid_sky_view: Interior-row sky view factors.
        first_sky_view: First-row sky view factors.
        last_sky_view: Last-row sky view factors.
    """

    datetimes: list[dt | None]
    mid_irradiance: NDArray[np.floating]
    first_irradiance: NDArray[np.floating]
    last_irradiance: NDArray[np.floating]
    mid_shade: NDArray[np.integer]
    first_shade: NDArray[np.integer]
    last_shade: NDArray[np.integer]
    mid_sky_view: NDArray[np.floating]
    first_sky_view: NDArray[np.floating]
    last_sky_view: NDArray[np.floating]

    @classmethod
    def from_results(cls, results: list[GroundShadingResult], n_segments: int) -> GroundShadingTimeseries:
        """Stack per-timestep results in order."""

        def stack(arrays: list, dtype) -> NDArray:
            if not arrays:
                return np.empty((0, n_segments), dtype=dtype)
            return np.stack(arrays).astype(dtype, copy=False)

        return cls(
            datetimes=[r.datetime for r in results],
            mid_irradiance=stack([r.irradiance.mid for r in results], np.float64),
            first_irradiance=stack([r.irradiance.first for r in results], np.float64),
            last_irradiance=stack([r.irradiance.last for r in results], np.float64),
            mid_shade=stack([r.shadow.mid for r in results], np.int8),
            first_shade=stack([r.shadow.first for r in results], np.int8),
            last_shade=stack([r.shadow.last for r in results], np.int8),
            mid_sky_view=stack([r.sky_view.mid for r in results], np.float64),
            first_sky_view=stack([r.sky_view.first for r in results], np.float64),
            last_sky_view=stack([r.sky_view.last for r in results], np.float64),
        )

    def __len__(self) -> int:
        return len(self.datetimes)
