"""
Sky view factor component.

Computes, for every ground segment between two rows, the fraction of the
isotropic diffuse sky that is visible. The sky is split into three
disjoint angular regions seen from the segment midpoint:

- ahead: through the gaps between rows further forward (direction -1)
- above: through the gap directly overhead (direction 0)
- behind: through the gaps between rows further back (direction +1)

Each region is summed row gap by row gap until a gap contributes no more
than 1% of the running total. The first and last rows reuse the interior
sums for the side that still sees an unbroken run of rows.

Reference:
    Marion, B.; Ayala S.; Deline, C. - Bifacial PV View Factor model (bifacialvf)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import numpy as np

from ..bundles import SkyViewBundle
from ..constants import CONVERGENCE_FRACTION, MAX_ROW_ITERATIONS
from ..groundshade_logging import get_logger
from ..models.geometry import RowType
from ..physics.radiation import get_view_factor
from ..utils import segment_midpoints

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

    from ..models.geometry import RowGeometry

logger = get_logger(__name__)

ViewFactorFn = Callable[[np.ndarray, np.ndarray], np.ndarray]


def sky_view_in_direction(
    x: ArrayLike,
    geometry: RowGeometry,
    row_type: RowType,
    direction: int,
    view_factor: ViewFactorFn = get_view_factor,
) -> NDArray[np.floating]:
    """
    Sum the sky view seen through successive row gaps in one direction.

    The gap at ``offset`` lies between the row whose lower edge is at
    ``offset * pitch`` (in front) and the row at ``(offset + 1) * pitch``
    (behind). For each gap the visible span is [beta1, beta2], where beta1
    is the highest angle blocked by the row behind and beta2 the lowest
    angle blocked by the row in front.

    Args:
        x: Ground positions in [0, pitch) (panel slope lengths), scalar or array
        geometry: Normalised row geometry
        row_type: INTERIOR, FIRST (no row in front) or LAST (no row behind)
        direction: -1 (ahead), 0 (above, a single gap) or +1 (behind)
        view_factor: Function giving the view factor of the span [beta1, beta2]

    Returns:
        Summed view factor per position, same shape as ``x``
    """
    if direction not in (-1, 0, 1):
        raise ValueError(f"direction must be -1, 0 or 1, got {direction}")

    x = np.asarray(x, dtype=np.float64)
    h = geometry.height
    b = geometry.base
    c = geometry.clearance
    pitch = geometry.pitch

    sky_sum = np.zeros(x.shape, dtype=np.float64)
    active = np.ones(x.shape, dtype=bool)
    offset = direction

    for _ in range(MAX_ROW_ITERATIONS):
        if row_type == RowType.LAST:
            beta1 = np.zeros(x.shape, dtype=np.float64)
        else:
            # Upper and lower edge of the row behind the gap
            ang_a = np.arctan2(h + c, (offset + 1) * pitch + b - x)
            ang_b = np.arctan2(c, (offset + 1) * pitch - x)
            beta1 = np.maximum(ang_a, ang_b)

        if row_type == RowType.FIRST:
            beta2 = np.full(x.shape, np.pi, dtype=np.float64)
        else:
            # Upper and lower edge of the row in front of the gap
            ang_c = np.arctan2(h + c, offset * pitch + b - x)
            ang_d = np.arctan2(c, offset * pitch - x)
            beta2 = np.minimum(ang_c, ang_d)

        open_sky = beta2 > beta1
        sky_patch = np.where(open_sky & active, view_factor(beta1, beta2), 0.0)

        sky_sum += sky_patch
        active &= sky_patch > CONVERGENCE_FRACTION * sky_sum
        offset += direction

        if offset == 0 or not active.any():
            break
    else:
        logger.warning(
            f"Sky view summation (row type {row_type.name}, direction {direction:+d}) "
            f"stopped after {MAX_ROW_ITERATIONS} rows without converging"
        )

    return sky_sum


def compute_sky_view_factors(
    geometry: RowGeometry,
    n_segments: int,
    view_factor: ViewFactorFn = get_view_factor,
) -> SkyViewBundle:
    """
    Compute sky view factors for the interior, first-row and last-row ground.

    Args:
        geometry: Normalised row geometry
        n_segments: Number of ground segments between two rows
        view_factor: Function giving the view factor of an angular span

    Returns:
        SkyViewBundle with per-segment view factors for each row context and
        the directional interior sums they were assembled from
    """
    x = segment_midpoints(geometry.pitch, n_segments)

    # Directions are split so the view can extend freely forward and backward
    ahead = sky_view_in_direction(x, geometry, RowType.INTERIOR, -1, view_factor)
    above = sky_view_in_direction(x, geometry, RowType.INTERIOR, 0, view_factor)
    behind = sky_view_in_direction(x, geometry, RowType.INTERIOR, 1, view_factor)

    # First row: nothing in front, the view behind matches the interior rows
    above_first = sky_view_in_direction(x, geometry, RowType.FIRST, 0, view_factor)
    # Last row: nothing behind, the view ahead matches the interior rows
    above_last = sky_view_in_direction(x, geometry, RowType.LAST, 0, view_factor)

    return SkyViewBundle(
        mid=ahead + above + behind,
        first=above_first + behind,
        last=ahead + above_last,
        ahead=ahead,
        above=above,
        behind=behind,
        above_first=above_first,
        above_last=above_last,
    )
