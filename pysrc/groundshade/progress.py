"""
Progress reporting for time-series runs.

Uses a tqdm progress bar in the terminal, or forwards progress to a
caller-supplied callback instead.

Usage:
    from groundshade.progress import get_progress_iterator, ProgressReporter

    # Simple iteration with progress
    for step in get_progress_iterator(timesteps, desc="Ground shading"):
        engine.calculate(step)

    # Manual progress control
    progress = ProgressReporter(total=len(timesteps), desc="Ground shading")
    for step in timesteps:
        engine.calculate(step)
        progress.update(1)
    progress.close()
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

from tqdm import tqdm

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ProgressReporter:
    """
    Progress reporter backed by tqdm or a callback.

    Args:
        total: Total number of steps (required for percentage calculation).
        desc: Description shown in progress bar.
        callback: Optional callback(current, total). If provided, it replaces
                  the tqdm bar.
        disable: If True, disable all progress output.
    """

    def __init__(
        self,
        total: int,
        desc: str = "",
        callback: Callable[[int, int], None] | None = None,
        disable: bool = False,
    ):
        self.total = total
        self.desc = desc
        self.current = 0
        self.disable = disable
        self._closed = False

        self._callback = None
        self._tqdm_bar = None

        if disable:
            return

        if callback is not None:
            self._callback = callback
            logger.debug(f"Reporting progress through callback for: {desc}")
            return

        self._tqdm_bar = tqdm(total=total, desc=desc)

    def update(self, n: int = 1) -> None:
        """Update progress by n steps."""
        if self._closed:
            return

        self.current += n

        if self.disable:
            return

        if self._callback is not None:
            self._callback(self.current, self.total)
        elif self._tqdm_bar is not None:
            self._tqdm_bar.update(n)

    def close(self) -> None:
        """Close the progress bar."""
        if self._closed:
            return
        self._closed = True

        if self._tqdm_bar is not None:
            self._tqdm_bar.close()


class _ProgressIterator(Iterator[T]):
    """Iterator wrapper that reports progress."""

    def __init__(self, iterable: Iterable[T], reporter: ProgressReporter):
        self._iterator = iter(iterable)
        self._reporter = reporter

    def __iter__(self) -> _ProgressIterator[T]:
        return self

    def __next__(self) -> T:
        try:
            item = next(self._iterator)
            self._reporter.update(1)
            return item
        except StopIteration:
            self._reporter.close()
            raise


def get_progress_iterator(
    iterable: Iterable[T],
    desc: str = "",
    total: int | None = None,
    callback: Callable[[int, int], None] | None = None,
    disable: bool = False,
) -> Iterator[T]:
    """
    Wrap an iterable with automatic progress reporting.

    Args:
        iterable: The iterable to wrap.
        desc: Description for the progress bar.
        total: Total number of items (computed from len() if not provided).
        callback: Optional callback(current, total) used instead of tqdm.
        disable: If True, disable progress output entirely.

    Returns:
        Iterator that reports progress as items are consumed.
    """
    if total is None:
        try:
            total = len(iterable)  # type: ignore
        except TypeError:
            # Iterable doesn't have len()
            total = 0

    reporter = ProgressReporter(total=total, desc=desc, callback=callback, disable=disable)
    return _ProgressIterator(iterable, reporter)
