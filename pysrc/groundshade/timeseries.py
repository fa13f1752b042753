"""Time-series ground shading calculation.

Provides :func:`calculate_timeseries`, which builds a
:class:`~groundshade.GroundShading` engine once and runs it over a list of
:class:`~groundshade.TimestepInput` objects, stacking the per-segment
outputs into ``(n_timesteps, n_segments)`` arrays.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from .diagnostics import ModelDump
from .ground_shading import GroundShading
from .groundshade_logging import get_logger
from .models.results import GroundShadingTimeseries
from .progress import get_progress_iterator

if TYPE_CHECKING:
    from .models.config import GroundShadingConfig
    from .models.timestep import TimestepInput

logger = get_logger(__name__)


def calculate_timeseries(
    config: GroundShadingConfig,
    timesteps: list[TimestepInput],
    dump_dir: str | Path | None = None,
    progress_callback: Callable[[int, int], None] | None = None,
    show_progress: bool = True,
) -> GroundShadingTimeseries:
    """
    Calculate ground irradiance for a series of timesteps.

    Configuration errors are raised before the first timestep is computed.
    A ShadingGeometryError in any timestep aborts the whole run.

    Args:
        config: Ground shading configuration.
        timesteps: Per-timestep inputs in chronological order.
        dump_dir: If provided, the model state of every timestep is appended
            to CSV files in this directory.
        progress_callback: Optional callback(current_step, total_steps) called
            as each timestep starts. If None, a tqdm progress bar is shown.
        show_progress: Set False to disable progress reporting entirely.

    Returns:
        GroundShadingTimeseries with stacked irradiance, shade flags and
        sky view factors.

    Example:
        >>> series = calculate_timeseries(config, timesteps)
        >>> series.mid_irradiance.mean(axis=1)  # mean interior ground irradiance per step
    """
    model_dump = ModelDump(dump_dir) if dump_dir is not None else None
    engine = GroundShading(config, model_dump=model_dump)

    n_steps = len(timesteps)
    logger.info(f"Calculating ground shading for {n_steps} timesteps")

    steps = get_progress_iterator(
        timesteps,
        desc="Ground shading",
        callback=progress_callback,
        disable=not show_progress,
    )

    start = time.perf_counter()
    results = [engine.calculate(timestep) for timestep in steps]

    elapsed = time.perf_counter() - start
    logger.info(f"Ground shading complete: {n_steps} timesteps in {elapsed:.2f} s")

    return GroundShadingTimeseries.from_results(results, engine.n_segments)
