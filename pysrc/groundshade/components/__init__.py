"""
Ground shading computation components.

- **sky_view** - diffuse sky view factors per ground segment
- **beam_shadow** - direct-beam shade flags per ground segment
- **irradiance** - combination into total ground irradiance

``GroundShading`` wires them together per timestep.
"""

__all__ = ["sky_view", "beam_shadow", "irradiance"]
