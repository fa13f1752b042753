"""
Ground irradiance component.

Adds the diffuse sky light a segment sees to the beam light reaching it.
Shaded segments still receive the fraction of beam transmitted through
the modules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from ..bundles import GroundIrradianceBundle

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from ..bundles import ShadowBundle, SkyViewBundle


def ground_irradiance(
    sky_view: NDArray[np.floating],
    shade: NDArray[np.integer],
    direct_horizontal: float,
    diffuse_horizontal: float,
    transmission_factor: float,
) -> NDArray[np.floating]:
    """
    Irradiance on each ground segment of one row context (W/m²).

    Formula: HDif * svf + (HDir if unshaded else HDir * transmission)
    """
    beam = np.where(shade == 0, direct_horizontal, direct_horizontal * transmission_factor)
    return diffuse_horizontal * np.asarray(sky_view, dtype=np.float64) + beam


def combine_ground_irradiance(
    sky_view: SkyViewBundle,
    shadow: ShadowBundle,
    direct_horizontal: float,
    diffuse_horizontal: float,
    transmission_factor: float,
) -> GroundIrradianceBundle:
    """
    Combine view factors and shade flags into ground irradiance.

    Args:
        sky_view: Sky view factors for the three row contexts
        shadow: Beam shade flags for the three row contexts
        direct_horizontal: Direct horizontal irradiance (W/m²)
        diffuse_horizontal: Diffuse horizontal irradiance (W/m²)
        transmission_factor: Fraction of beam light passing through a module

    Returns:
        GroundIrradianceBundle for interior, first-row and last-row ground
    """
    return GroundIrradianceBundle(
        mid=ground_irradiance(sky_view.mid, shadow.mid, direct_horizontal, diffuse_horizontal, transmission_factor),
        first=ground_irradiance(
            sky_view.first, shadow.first, direct_horizontal, diffuse_horizontal, transmission_factor
        ),
        last=ground_irradiance(sky_view.last, shadow.last, direct_horizontal, diffuse_horizontal, transmission_factor),
    )
