"""Shared pytest configuration and geometry helpers."""

import math
from datetime import datetime

import pytest
from groundshade import GroundShadingConfig, RowGeometry, TimestepInput


def make_geometry(
    tilt: float = 0.3,
    pitch: float = 3.0,
    clearance: float = 0.2,
    azimuth: float = 0.0,
    bandwidth: float = 1.0,
    transmission_factor: float = 0.05,
) -> RowGeometry:
    """Row geometry already in panel slope lengths (bandwidth 1 m)."""
    return RowGeometry(
        tilt=tilt,
        azimuth=azimuth,
        pitch=pitch,
        clearance=clearance,
        bandwidth=bandwidth,
        transmission_factor=transmission_factor,
    )


def make_fixed_config(**overrides) -> GroundShadingConfig:
    """Fixed-tilt configuration matching make_geometry() defaults."""
    params = {
        "array_type": "Unlimited Rows",
        "plane_tilt": math.degrees(0.3),
        "collector_bandwidth": 1.0,
        "pitch": 3.0,
        "ground_clearance": 0.2,
        "transmission_factor": 0.05,
        "n_segments": 10,
    }
    params.update(overrides)
    return GroundShadingConfig(**params)


def make_tracker_config(**overrides) -> GroundShadingConfig:
    """Single-axis tracker configuration with a 2 m wide, 6 m pitch array."""
    params = {
        "array_type": "Single Axis Horizontal Tracking (N-S)",
        "transmission_factor": 0.05,
        "n_segments": 10,
        "tracker_width": 2.0,
        "tracker_pitch": 6.0,
    }
    params.update(overrides)
    return GroundShadingConfig(**params)


def make_timestep(**overrides) -> TimestepInput:
    """Midday timestep with the sun 0.5 rad from zenith, due south."""
    params = {
        "datetime": datetime(2025, 6, 21, 12, 0),
        "sun_zenith": 0.5,
        "sun_azimuth": 0.0,
        "panel_tilt": 0.3,
        "panel_azimuth": 0.0,
        "clearance": 0.2,
        "direct_horizontal": 800.0,
        "diffuse_horizontal": 100.0,
    }
    params.update(overrides)
    return TimestepInput(**params)


@pytest.fixture
def geometry() -> RowGeometry:
    return make_geometry()
