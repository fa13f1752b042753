"""
Numeric constants and default parameters for ground shading.

All lengths used by the geometry code are in panel-slope-length units
unless stated otherwise.
"""

import math

# =============================================================================
# Unit Conversions
# =============================================================================

DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi


# =============================================================================
# Sky View Integration
# =============================================================================

# A row contribution at or below this fraction of the running directional
# sum ends the summation for that direction.
CONVERGENCE_FRACTION = 0.01

# Hard limit on rows visited in one direction. Realistic geometries converge
# in a handful of rows.
MAX_ROW_ITERATIONS = 1000


# =============================================================================
# Beam Shadow Classification
# =============================================================================

# Largest overlap (panel slope lengths) tolerated between the two halves of a
# wrapped shadow before the geometry is rejected.
SHADOW_OVERLAP_TOLERANCE = 1e-6

# Below this |tan(profile angle)| the sun sits on the horizon of the profile
# plane and the projected shadow length is unbounded.
MIN_PROFILE_TAN = 1e-12


# =============================================================================
# Defaults
# =============================================================================

# Number of segments the row-to-row ground span is divided into
DEFAULT_NUM_GROUND_SEGS = 100


__all__ = [
    "DEG_TO_RAD",
    "RAD_TO_DEG",
    "CONVERGENCE_FRACTION",
    "MAX_ROW_ITERATIONS",
    "SHADOW_OVERLAP_TOLERANCE",
    "MIN_PROFILE_TAN",
    "DEFAULT_NUM_GROUND_SEGS",
]
