"""Radiation geometry used by the ground shading components."""

from .radiation import get_profile_angle, get_view_factor

__all__ = ["get_profile_angle", "get_view_factor"]
