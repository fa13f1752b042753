"""
Radiation geometry for a ground point between PV rows.

Angles are measured in the plane perpendicular to the rows, from the
ground pointing towards the back of the array (0) over the zenith (pi/2)
to the front of the array (pi).

Reference:
    Marion, B. et al. (2017) - A Practical Irradiance Model for Bifacial PV Modules
"""

from __future__ import annotations

import numpy as np


def get_view_factor(beta1, beta2):
    """
    Diffuse view factor from a ground strip to the sky between two angles.

    An isotropic sky seen from a horizontal strip through the angular span
    [beta1, beta2] contributes 0.5 * (cos(beta1) - cos(beta2)). The whole
    sky, [0, pi], gives 1.

    Args:
        beta1: Lower limiting angle (radians), scalar or array
        beta2: Upper limiting angle (radians), scalar or array

    Returns:
        View factor with the broadcast shape of the inputs
    """
    return 0.5 * (np.cos(beta1) - np.cos(beta2))


def get_profile_angle(sun_zenith: float, sun_azimuth: float, panel_azimuth: float) -> float:
    """
    Sun elevation projected into the plane perpendicular to the rows.

    Args:
        sun_zenith: Sun zenith angle (radians)
        sun_azimuth: Sun azimuth, 0 = south, positive west (radians)
        panel_azimuth: Azimuth the panel faces, 0 = south, positive west (radians)

    Returns:
        Profile angle in [0, pi] for a sun above the horizon. Values above
        pi/2 mean the sun is behind the panel's front face.
    """
    return float(
        np.arctan2(
            np.cos(sun_zenith),
            np.sin(sun_zenith) * np.cos(sun_azimuth - panel_azimuth),
        )
    )
