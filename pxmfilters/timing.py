"""Wall-clock timing of repeated measurements, in milliseconds."""

from __future__ import annotations

import time


class CalcTime:
    """Collects elapsed times between :meth:`start` and :meth:`end` calls."""

    def __init__(self):
        self._times: list[float] = []
        self._started: float | None = None

    @property
    def measurements(self) -> tuple[float, ...]:
        """Recorded durations in milliseconds, oldest first."""
        return tuple(self._times)

    def start(self) -> None:
        self._started = time.perf_counter()

    def end(self) -> float:
        """Record and return the milliseconds since the last :meth:`start`."""
        if self._started is None:
            raise RuntimeError("end() called before start()")
        elapsed = (time.perf_counter() - self._started) * 1e3
        self._started = None
        self._times.append(elapsed)
        return elapsed

    def clear(self) -> None:
        self._times.clear()

    def average(self, drop_first=True, clear=True) -> float:
        """Mean duration in ms, optionally ignoring the first (warm-up) run."""
        times = self._times[1:] if drop_first else self._times
        if not times:
            raise ValueError("not enough measurements to average")
        mean = sum(times) / len(times)
        if clear:
            self._times.clear()
        return mean

    def last(self) -> float:
        """Duration of the most recent measurement in ms."""
        if not self._times:
            raise ValueError("no measurements recorded")
        return self._times[-1]

    def __enter__(self) -> "CalcTime":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.end()