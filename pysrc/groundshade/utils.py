"""Utility functions for parameter loading and ground discretisation."""

from __future__ import annotations

from types import SimpleNamespace
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray


# =============================================================================
# Namespace Conversion (for JSON parameter loading)
# =============================================================================


def dict_to_namespace(d: dict[str, Any] | list | Any) -> SimpleNamespace | list | Any:
    """
    Recursively convert dicts to SimpleNamespace.

    Args:
        d: Dictionary, list, or scalar value to convert

    Returns:
        SimpleNamespace for dicts, list of converted items for lists, or original value for scalars
    """
    if isinstance(d, dict):
        return SimpleNamespace(**{k: dict_to_namespace(v) for k, v in d.items()})
    elif isinstance(d, list):
        return [dict_to_namespace(i) for i in d]
    else:
        return d


# =============================================================================
# Ground Discretisation
# =============================================================================


def segment_midpoints(pitch: float, n_segments: int) -> NDArray[np.float64]:
    """
    Midpoints of the N equal subdivisions of the row-to-row span.

    Segment i sits at x = (i + 0.5) * pitch / N.

    Args:
        pitch: Row-to-row span (panel slope lengths)
        n_segments: Number of ground segments

    Returns:
        Array of shape (n_segments,)
    """
    delta = pitch / n_segments
    return (np.arange(n_segments, dtype=np.float64) + 0.5) * delta
