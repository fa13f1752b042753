"""
Beam shadow component.

Classifies every ground segment as shaded (1) or sunlit (0) by the direct
beam, for the interior rows, the ground in front of the first row and the
ground behind the last row.

The shadow of one row on flat ground is bounded by the shadows of its
lower edge (distance Lc from the row's front edge) and of its upper edge
(distance Lhc + b). Positive distances fall towards the back of the array.
Interior shadows are folded into the canonical span [0, pitch); a shadow
that runs past pitch wraps onto the start of the span.

A segment is tested at its midpoint only, so each segment is either fully
shaded or fully sunlit.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import TYPE_CHECKING

import numpy as np

from ..bundles import ShadowBundle, ShadowIntervals
from ..constants import MIN_PROFILE_TAN, SHADOW_OVERLAP_TOLERANCE
from ..errors import ShadingGeometryError
from ..groundshade_logging import get_logger
from ..physics.radiation import get_profile_angle
from ..utils import segment_midpoints

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from ..models.geometry import RowGeometry

logger = get_logger(__name__)

ProfileAngleFn = Callable[[float, float, float], float]


def shadow_projections(geometry: RowGeometry, front_profile_angle: float) -> tuple[float, float, float]:
    """
    Horizontal reach of the shadows cast by one row.

    Args:
        geometry: Normalised row geometry
        front_profile_angle: Sun profile angle relative to the panel front (radians)

    Returns:
        (Lh, Lc, Lhc): shadow lengths of the panel height, the clearance and
        their sum, in panel slope lengths
    """
    tan_pa = math.tan(front_profile_angle)
    lh = geometry.height / tan_pa
    lc = geometry.clearance / tan_pa
    lhc = (geometry.height + geometry.clearance) / tan_pa
    return lh, lc, lhc


def cast_shadow(lc: float, lhc: float, b: float) -> tuple[float, float]:
    """
    Shadow of a single row relative to its front edge, ordered start < end.

    When the sun strikes the module front the shadow of the lower edge lies
    nearer than the shadow of the upper edge; when it strikes the back the
    order reverses.
    """
    if lc < lhc + b:
        return lc, lhc + b
    return lhc + b, lc


def split_wrapped_shadow(start: float, end: float, pitch: float) -> tuple[tuple[float, float], ...]:
    """
    Split a shadow starting inside [0, pitch] at the span boundary.

    The part beyond pitch is the shadow falling in the next row-to-row
    space, which is identical to the start of this one.

    Args:
        start: Shadow start, already moved into [0, pitch]
        end: Shadow end
        pitch: Row-to-row span

    Returns:
        One interval, or two when the shadow wraps

    Raises:
        ShadingGeometryError: If the wrapped part would overlap the rest of
            the shadow by more than the tolerance.
    """
    if end <= pitch:
        return ((start, end),)

    wrapped_end = end - pitch
    if wrapped_end - start > SHADOW_OVERLAP_TOLERANCE:
        raise ShadingGeometryError(start, end, pitch)

    logger.debug(f"Shadow wraps span: [{start:.4f}, {pitch:.4f}) + [0, {wrapped_end:.4f})")
    return ((start, pitch), (0.0, wrapped_end))


def interior_shadow_intervals(lh: float, lc: float, lhc: float, pitch: float, b: float) -> ShadowIntervals:
    """
    Shaded ground between two interior rows.

    Args:
        lh, lc, lhc: Shadow projections from shadow_projections()
        pitch: Row-to-row span
        b: Horizontal extent of a panel
    """
    # Front of module partially shaded, back and ground completely shaded
    if lh > pitch - b:
        return ShadowIntervals(((0.0, pitch),))
    # Front of module completely shaded, back partially shaded, ground completely shaded
    if lh < -(pitch + b):
        return ShadowIntervals(((0.0, pitch),))

    # Move the shadow by whole spans into the row-to-row space
    if lhc >= 0.0:
        # Shadow towards the back of the row: module front sunlit, back shaded
        start, end = lc, lhc + b
        if start > pitch:
            shift = (math.ceil(start / pitch) - 1) * pitch
            start, end = start - shift, end - shift
    else:
        # Shadow towards the front of the row: either face may be sunlit
        start, end = cast_shadow(lc, lhc, b)
        if start < 0.0:
            shift = math.ceil(-start / pitch) * pitch
            start, end = start + shift, end + shift

    return ShadowIntervals(split_wrapped_shadow(start, end, pitch))


def first_row_shadow_intervals(lh: float, lc: float, lhc: float, pitch: float, b: float) -> ShadowIntervals:
    """
    Shaded ground in front of the first row.

    Only the first row's own shadow matters here; positions are measured
    from the first row, so the ground in front lies in [-pitch, 0).
    """
    # Front of module completely shaded, ground completely shaded
    if lh < -(pitch + b):
        return ShadowIntervals(((-pitch, pitch),), offset=-pitch)
    return ShadowIntervals((cast_shadow(lc, lhc, b),), offset=-pitch)


def last_row_shadow_intervals(lh: float, lc: float, lhc: float, pitch: float, b: float) -> ShadowIntervals:
    """
    Shaded ground behind the last row.

    Only the last row's own shadow matters here, and it is never wrapped
    since no row follows.
    """
    # Back of module completely shaded, ground completely shaded
    if lh > pitch - b:
        return ShadowIntervals(((0.0, pitch),))
    return ShadowIntervals((cast_shadow(lc, lhc, b),))


def _flags(intervals: ShadowIntervals, x: NDArray[np.floating]) -> NDArray[np.int8]:
    return intervals.contains(x).astype(np.int8)


def _all_shaded(n_segments: int, front_profile_angle: float | None = None) -> ShadowBundle:
    return ShadowBundle(
        mid=np.ones(n_segments, dtype=np.int8),
        first=np.ones(n_segments, dtype=np.int8),
        last=np.ones(n_segments, dtype=np.int8),
        front_profile_angle=front_profile_angle,
    )


def compute_beam_shadow(
    sun_zenith: float,
    sun_azimuth: float,
    geometry: RowGeometry,
    n_segments: int,
    profile_angle: ProfileAngleFn = get_profile_angle,
) -> ShadowBundle:
    """
    Classify each ground segment as shaded or sunlit by the direct beam.

    Args:
        sun_zenith: Sun zenith angle (radians)
        sun_azimuth: Sun azimuth, 0 = south, positive west (radians)
        geometry: Normalised row geometry for this timestep
        n_segments: Number of ground segments between two rows
        profile_angle: Function (zenith, azimuth, panel_azimuth) -> profile angle

    Returns:
        ShadowBundle with 0/1 flags for each row context

    Raises:
        ShadingGeometryError: If the interior shadow cannot be wrapped
            consistently into the row-to-row span.
    """
    # Sun below the horizon: no beam anywhere
    if sun_zenith > math.pi / 2:
        return _all_shaded(n_segments)

    front_pa = profile_angle(sun_zenith, sun_azimuth, geometry.azimuth)

    # Sun on the horizon of the profile plane: shadows are unbounded
    if abs(math.tan(front_pa)) < MIN_PROFILE_TAN:
        logger.debug(f"Sun on the profile-plane horizon (profile angle {front_pa:.6f} rad), ground fully shaded")
        return _all_shaded(n_segments, front_pa)

    lh, lc, lhc = shadow_projections(geometry, front_pa)
    pitch = geometry.pitch
    b = geometry.base
    logger.debug(f"Profile angle {front_pa:.4f} rad: Lh={lh:.4f}, Lc={lc:.4f}, Lhc={lhc:.4f}")

    mid_intervals = interior_shadow_intervals(lh, lc, lhc, pitch, b)
    first_intervals = first_row_shadow_intervals(lh, lc, lhc, pitch, b)
    last_intervals = last_row_shadow_intervals(lh, lc, lhc, pitch, b)

    x = segment_midpoints(pitch, n_segments)
    return ShadowBundle(
        mid=_flags(mid_intervals, x),
        first=_flags(first_intervals, x),
        last=_flags(last_intervals, x),
        front_profile_angle=front_pa,
        mid_intervals=mid_intervals,
        first_intervals=first_intervals,
        last_intervals=last_intervals,
    )
