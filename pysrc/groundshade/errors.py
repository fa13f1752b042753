"""Ground shading error types for actionable error messages.

Every error raised by this package is fatal for the run: geometry or
configuration problems invalidate the current and all later timesteps.

Example:
    try:
        engine = groundshade.GroundShading(config)
    except groundshade.ConfigurationError as e:
        print(f"Bad parameter '{e.parameter}': {e.reason}")
"""

from __future__ import annotations


class GroundShadingError(Exception):
    """Base class for all ground shading errors."""

    pass


class ConfigurationError(GroundShadingError):
    """Raised when configuration is invalid or inconsistent.

    Attributes:
        parameter: The problematic parameter name.
        reason: Why the configuration is invalid.
    """

    def __init__(self, parameter: str, reason: str):
        self.parameter = parameter
        self.reason = reason
        message = f"Invalid configuration for '{parameter}': {reason}"
        super().__init__(message)


class ShadingGeometryError(GroundShadingError):
    """Raised when a wrapped ground shadow overlaps itself.

    A shadow that extends past the row-to-row span is split into two
    sub-intervals. Their overlap can only come from a defect in the interval
    normalisation, so it is reported instead of being clamped.

    Attributes:
        start: Shadow start after normalisation (panel slope lengths).
        end: Shadow end after normalisation (panel slope lengths).
        pitch: Row-to-row span (panel slope lengths).
        overlap: Length by which the two sub-intervals overlap.
    """

    def __init__(self, start: float, end: float, pitch: float):
        self.start = start
        self.end = end
        self.pitch = pitch
        self.overlap = (end - pitch) - start
        message = (
            "Unexpected shading coordinates encountered:\n"
            f"  Shadow: [{start:.6f}, {end:.6f}) in span of {pitch:.6f}\n"
            f"  Wrapped sub-intervals overlap by {self.overlap:.3e}"
        )
        super().__init__(message)


class TimestepDataError(GroundShadingError):
    """Raised when per-timestep input data is invalid.

    Attributes:
        field: The problematic input field (e.g., "direct_horizontal").
        value: The invalid value.
        reason: Why the value is invalid.
    """

    def __init__(self, field: str, value: float | str, reason: str | None = None):
        self.field = field
        self.value = value
        self.reason = reason
        message = f"Invalid timestep data for '{field}': {value}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
