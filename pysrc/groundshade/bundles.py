"""
Data bundle classes for ground shading computation components.

Each bundle represents the output of a distinct computation stage:
- SkyViewBundle: Diffuse sky view factors per ground segment
- ShadowIntervals: Shaded stretches of ground for one row context
- ShadowBundle: Beam shade flags per ground segment
- GroundIrradianceBundle: Combined ground irradiance per ground segment

Every per-segment array has shape (n_segments,) and is ordered by segment
index. The three row contexts are the interior rows (mid), the ground in
front of the first row (first) and the ground behind the last row (last).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray


@dataclass
class SkyViewBundle:
    """
    Sky view factor computation results.

    Attributes:
        mid: Interior-row sky view factors (0-1)
        first: First-row sky view factors (0-1)
        last: Last-row sky view factors (0-1)
        ahead: Interior view summed over the rows ahead of each segment
        above: Interior view through the gap directly above each segment
        behind: Interior view summed over the rows behind each segment
        above_first: View above each segment with no row in front
        above_last: View above each segment with no row behind
    """

    mid: NDArray[np.floating]
    first: NDArray[np.floating]
    last: NDArray[np.floating]
    ahead: NDArray[np.floating]
    above: NDArray[np.floating]
    behind: NDArray[np.floating]
    above_first: NDArray[np.floating]
    above_last: NDArray[np.floating]


@dataclass(frozen=True)
class ShadowIntervals:
    """
    Half-open shaded stretches [start, end) of ground for one row context.

    Attributes:
        intervals: Shaded stretches in panel slope lengths
        offset: Shift applied to segment midpoints before testing membership.
            The first-row context measures ground ahead of the row, so its
            midpoints are shifted by -pitch.
    """

    intervals: tuple[tuple[float, float], ...]
    offset: float = 0.0

    def contains(self, x: NDArray[np.floating]) -> NDArray[np.bool_]:
        """Mask of points (before the offset is applied) lying in any interval."""
        xs = np.asarray(x, dtype=np.float64) + self.offset
        mask = np.zeros(xs.shape, dtype=bool)
        for start, end in self.intervals:
            mask |= (xs >= start) & (xs < end)
        return mask


@dataclass
class ShadowBundle:
    """
    Beam shadow computation results.

    Attributes:
        mid: Interior-row shade flags (0 = sunlit, 1 = shaded)
        first: First-row shade flags
        last: Last-row shade flags
        front_profile_angle: Sun profile angle relative to the panel front
            (radians). None when the sun is below the horizon.
        mid_intervals: Shaded stretches for the interior rows
        first_intervals: Shaded stretches ahead of the first row
        last_intervals: Shaded stretches behind the last row
    """

    mid: NDArray[np.integer]
    first: NDArray[np.integer]
    last: NDArray[np.integer]
    front_profile_angle: float | None = None
    mid_intervals: ShadowIntervals | None = None
    first_intervals: ShadowIntervals | None = None
    last_intervals: ShadowIntervals | None = None


@dataclass
class GroundIrradianceBundle:
    """
    Total irradiance reaching each ground segment (W/m²).

    Attributes:
        mid: Interior-row ground irradiance
        first: Ground irradiance in front of the first row
        last: Ground irradiance behind the last row
    """

    mid: NDArray[np.floating]
    first: NDArray[np.floating]
    last: NDArray[np.floating]
