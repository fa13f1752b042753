"""
CSV dump of the ground model state, one row per timestep.

Files written to the output directory:

- shFirst.csv, shMid.csv, shLast.csv: shade flags per segment
- skyViewAll.csv: interior sky view factors per segment
- skyViewOne.csv: segment index with first, mid and last view factors
  (rewritten every timestep)
- irrFirst.csv, irrMid.csv, irrLast.csv: ground irradiance per segment
- setup.csv: panel azimuth and tilt (degrees), pitch, clearance and bandwidth (m)

Every appended row starts with the timestamp.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import TYPE_CHECKING

from .constants import RAD_TO_DEG
from .groundshade_logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .models.results import GroundShadingResult

logger = get_logger(__name__)


class ModelDump:
    """
    Appends per-timestep ground model state to CSV files.

    Args:
        output_dir: Directory for the CSV files (created if missing).
    """

    def __init__(self, output_dir: str | Path):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Writing ground model dump to {self.output_dir}")

    def _append(self, name: str, row: Iterable) -> None:
        with open(self.output_dir / name, "a", newline="") as f:
            csv.writer(f).writerow(row)

    def write(self, result: GroundShadingResult) -> None:
        """Write the state of one timestep."""
        ts = result.datetime.isoformat() if result.datetime is not None else ""
        shadow = result.shadow
        sky = result.sky_view
        irr = result.irradiance
        geom = result.geometry

        self._append("shFirst.csv", [ts, *shadow.first.tolist()])
        self._append("shMid.csv", [ts, *shadow.mid.tolist()])
        self._append("shLast.csv", [ts, *shadow.last.tolist()])

        self._append("skyViewAll.csv", [ts, *sky.mid.tolist()])
        with open(self.output_dir / "skyViewOne.csv", "w", newline="") as f:
            writer = csv.writer(f)
            for i, (first, mid, last) in enumerate(zip(sky.first, sky.mid, sky.last)):
                writer.writerow([i, float(first), float(mid), float(last)])

        self._append("irrFirst.csv", [ts, *irr.first.tolist()])
        self._append("irrMid.csv", [ts, *irr.mid.tolist()])
        self._append("irrLast.csv", [ts, *irr.last.tolist()])

        self._append(
            "setup.csv",
            [
                ts,
                geom.azimuth * RAD_TO_DEG,
                geom.tilt * RAD_TO_DEG,
                geom.pitch * geom.bandwidth,
                geom.clearance * geom.bandwidth,
                geom.bandwidth,
            ],
        )
