"""Model configuration classes."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import SimpleNamespace

from ..constants import DEFAULT_NUM_GROUND_SEGS, DEG_TO_RAD
from ..errors import ConfigurationError
from ..groundshade_logging import get_logger
from .geometry import ArrayType, RowGeometry, TrackMode

logger = get_logger(__name__)


@dataclass
class GroundShadingConfig:
    """
    Configuration for the bifacial ground shading model.

    Lengths are given in metres and angles in degrees; they are normalised
    to panel slope lengths and radians by to_row_geometry().

    Attributes:
        array_type: Orientation and shading arrangement of the array.
        plane_tilt: Fixed panel tilt (degrees). Unlimited Rows only.
        panel_azimuth: Fixed panel azimuth, 0 = south, positive west (degrees).
        collector_bandwidth: Sloped width of a row (m). Unlimited Rows only.
        pitch: Row-to-row spacing (m). Unlimited Rows only.
        ground_clearance: Height of the panel's lower edge (m). Unlimited Rows only.
        transmission_factor: Fraction of beam light transmitted through the array.
        n_segments: Number of ground segments between two rows. Default 100.
        use_bifacial: Whether the bifacial ground model is enabled.
        tracker_width: Active tracker width (m). Single-axis trackers only.
        tracker_pitch: Tracker row spacing (m). Single-axis trackers only.

    Examples:
        Fixed tilt:

        >>> config = GroundShadingConfig(
        ...     plane_tilt=17.2, collector_bandwidth=2.0, pitch=6.0, ground_clearance=0.4
        ... )

        Load from JSON:

        >>> config = GroundShadingConfig.from_json("site_params.json")
    """

    array_type: ArrayType | str = ArrayType.UNLIMITED_ROWS
    plane_tilt: float = 25.0
    panel_azimuth: float = 0.0
    collector_bandwidth: float = 2.0
    pitch: float = 6.0
    ground_clearance: float = 1.0
    transmission_factor: float = 0.0
    n_segments: int = DEFAULT_NUM_GROUND_SEGS
    use_bifacial: bool = True
    tracker_width: float | None = None
    tracker_pitch: float | None = None

    def __post_init__(self):
        if not isinstance(self.array_type, ArrayType):
            try:
                self.array_type = ArrayType(self.array_type)
            except ValueError as err:
                raise ConfigurationError("array_type", f"unknown array type '{self.array_type}'") from err

    @property
    def track_mode(self) -> TrackMode:
        """
        Tracking mode implied by the array type.

        Raises:
            ConfigurationError: If the array type is not supported by the
                bifacial ground model.
        """
        mode = self.array_type.track_mode
        if mode is None:
            raise ConfigurationError(
                "array_type",
                f"bifacial is not supported for the selected orientation and shading ({self.array_type.value})",
            )
        return mode

    def validate(self) -> TrackMode:
        """
        Check the configuration before any timestep is computed.

        Returns:
            The tracking mode.

        Raises:
            ConfigurationError: On the first invalid or missing parameter.
        """
        if not self.use_bifacial:
            raise ConfigurationError("use_bifacial", "the bifacial ground model is disabled")

        mode = self.track_mode

        if isinstance(self.n_segments, bool) or not isinstance(self.n_segments, int) or self.n_segments <= 0:
            raise ConfigurationError("n_segments", f"must be a positive integer, got {self.n_segments!r}")
        if not 0.0 <= self.transmission_factor <= 1.0:
            raise ConfigurationError(
                "transmission_factor", f"must be in [0, 1], got {self.transmission_factor}"
            )

        if mode == TrackMode.SAXT:
            for name in ("tracker_width", "tracker_pitch"):
                value = getattr(self, name)
                if value is None or not value > 0:
                    raise ConfigurationError(name, f"must be positive for {self.array_type.value}, got {value}")
        else:
            for name in ("collector_bandwidth", "pitch"):
                value = getattr(self, name)
                if not value > 0:
                    raise ConfigurationError(name, f"must be positive, got {value}")
            if self.ground_clearance < 0:
                raise ConfigurationError("ground_clearance", f"must be non-negative, got {self.ground_clearance}")

        return mode

    def to_row_geometry(self) -> RowGeometry:
        """
        Normalised row geometry known at configuration time.

        For trackers only pitch and bandwidth are fixed; tilt, azimuth and
        clearance start at zero and are replaced every timestep.
        """
        mode = self.validate()
        if mode == TrackMode.SAXT:
            return RowGeometry.from_meters(
                tilt=0.0,
                azimuth=0.0,
                pitch=self.tracker_pitch,
                clearance=0.0,
                bandwidth=self.tracker_width,
                transmission_factor=self.transmission_factor,
            )
        return RowGeometry.from_meters(
            tilt=self.plane_tilt * DEG_TO_RAD,
            azimuth=self.panel_azimuth * DEG_TO_RAD,
            pitch=self.pitch,
            clearance=self.ground_clearance,
            bandwidth=self.collector_bandwidth,
            transmission_factor=self.transmission_factor,
        )

    @classmethod
    def from_json(cls, path: str | Path | None = None) -> GroundShadingConfig:
        """
        Load configuration from a JSON parameters file.

        The file has a "Bifacial" section (UseBifacialModel, GroundClearance,
        PanelTransFactor, optional NumGroundSegs) and an "Orientation" section
        (ArrayType plus the fields that array type needs).

        Args:
            path: Path to the parameters file. If None, loads the bundled defaults.

        Raises:
            ConfigurationError: If a required section or key is missing, or
                the array type is not supported.
        """
        from ..config import load_params

        params = load_params(path)
        return cls.from_namespace(params)

    @classmethod
    def from_namespace(cls, params: SimpleNamespace) -> GroundShadingConfig:
        """Build configuration from already loaded parameters."""
        use_bifacial = _require(params, "Bifacial", "UseBifacialModel")
        if not isinstance(use_bifacial, bool):
            raise ConfigurationError("Bifacial.UseBifacialModel", f"must be true or false, got {use_bifacial!r}")
        transmission = float(_require(params, "Bifacial", "PanelTransFactor"))
        n_segments = _optional(params, "Bifacial", "NumGroundSegs", DEFAULT_NUM_GROUND_SEGS)

        array_type = _require(params, "Orientation", "ArrayType")
        try:
            array_type = ArrayType(array_type)
        except ValueError as err:
            raise ConfigurationError("ArrayType", f"unknown array type '{array_type}'") from err

        if array_type == ArrayType.UNLIMITED_ROWS:
            config = cls(
                array_type=array_type,
                plane_tilt=float(_require(params, "Orientation", "PlaneTilt")),
                panel_azimuth=float(_optional(params, "Orientation", "Azimuth", 0.0)),
                collector_bandwidth=float(_require(params, "Orientation", "CollBandWidth")),
                pitch=float(_require(params, "Orientation", "Pitch")),
                ground_clearance=float(_require(params, "Bifacial", "GroundClearance")),
                transmission_factor=transmission,
                n_segments=n_segments,
                use_bifacial=use_bifacial,
            )
        elif array_type == ArrayType.SINGLE_AXIS_ELEVATION_TRACKING:
            config = cls(
                array_type=array_type,
                transmission_factor=transmission,
                n_segments=n_segments,
                use_bifacial=use_bifacial,
                tracker_width=float(_require(params, "Orientation", "WActiveSAET")),
                tracker_pitch=float(_require(params, "Orientation", "PitchSAET")),
            )
        elif array_type == ArrayType.SINGLE_AXIS_HORIZONTAL_TRACKING:
            config = cls(
                array_type=array_type,
                transmission_factor=transmission,
                n_segments=n_segments,
                use_bifacial=use_bifacial,
                tracker_width=float(_require(params, "Orientation", "WActiveSAST")),
                tracker_pitch=float(_require(params, "Orientation", "PitchSAST")),
            )
        else:
            raise ConfigurationError(
                "ArrayType",
                f"bifacial is not supported for the selected orientation and shading ({array_type.value})",
            )

        logger.info(f"Loaded ground shading config: {array_type.value}, {n_segments} ground segments")
        return config


def _require(params: SimpleNamespace, section: str, key: str):
    block = getattr(params, section, None)
    if block is None:
        raise ConfigurationError(section, "section missing from parameters file")
    if not hasattr(block, key):
        raise ConfigurationError(f"{section}.{key}", "missing from parameters file")
    return getattr(block, key)


def _optional(params: SimpleNamespace, section: str, key: str, default):
    block = getattr(params, section, None)
    return getattr(block, key, default) if block is not None else default
