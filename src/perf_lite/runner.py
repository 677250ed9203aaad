"""Benchmark runner.

A run goes through three phases in order: warmup (untimed), calibration
(one timed batch used to size the measurement) and measurement (every call
timed individually). Exceptions raised by the work propagate untouched; no
partial result is ever returned.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import timedelta
from functools import partial
from typing import Any

from perf_lite.barrier import clobber, do_not_optimize
from perf_lite.config import BenchmarkConfig
from perf_lite.errors import require
from perf_lite.logging import Logger, default_logger
from perf_lite.result import BenchmarkResult
from perf_lite.units import TimeUnit

CALIBRATION_ITERATIONS = 1_000
MIN_ITERATIONS = 1_000
MAX_ITERATIONS = 1_000_000


def adjust_iterations(total_ns: int, target_duration_ms: int, fallback: int) -> int:
    """Size the measurement phase from a timed calibration batch.

    Args:
        total_ns: Elapsed time of the whole calibration batch.
        target_duration_ms: Wall time the measurement should roughly fill.
        fallback: Count returned unmodified when the batch could not be
            timed (non-positive elapsed time on a coarse clock).

    Returns:
        ``target / per-call cost`` clamped to [MIN_ITERATIONS, MAX_ITERATIONS],
        or ``fallback``.
    """
    if total_ns <= 0:
        return fallback

    per_call_ns = total_ns / CALIBRATION_ITERATIONS
    if per_call_ns <= 0.0:
        return fallback

    adjusted = int(target_duration_ms * 1_000_000 / per_call_ns)
    return min(max(adjusted, MIN_ITERATIONS), MAX_ITERATIONS)


class Benchmark:
    """Configurable benchmark runner.

    Configuration calls validate eagerly and return the runner, so they can
    be chained:

        result = (
            Benchmark()
            .warmup(5)
            .target_duration(50)
            .unit(TimeUnit.MICROSECONDS)
            .name("sort")
            .run(sorted, data)
        )

    Args:
        config: Starting configuration. Defaults to BenchmarkConfig.default().
        logger: Receives phase progress (debug) and diagnostics. Defaults to
            the library logger.
    """

    def __init__(
        self,
        config: BenchmarkConfig | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._config = config if config is not None else BenchmarkConfig.default()
        self._logger = logger if logger is not None else default_logger()

    def __repr__(self) -> str:
        return f"Benchmark({self._config!r})"

    @property
    def config(self) -> BenchmarkConfig:
        return self._config

    def warmup(self, count: int) -> Benchmark:
        """Set the number of unmeasured warmup calls (must be > 0)."""
        self._config = self._config.replace(warmup_iterations=count)
        return self

    def iterations(self, count: int) -> Benchmark:
        """Set the fallback measured-iteration count (must be > 0)."""
        self._config = self._config.replace(iterations=count)
        return self

    def target_duration(self, duration: int | timedelta) -> Benchmark:
        """Set how long measurement should roughly take, in ms or as a timedelta."""
        if isinstance(duration, timedelta):
            duration = duration // timedelta(milliseconds=1)
        self._config = self._config.replace(target_duration_ms=duration)
        return self

    def unit(self, unit: TimeUnit) -> Benchmark:
        """Set the unit the statistics are expressed in."""
        self._config = self._config.replace(time_unit=unit)
        return self

    def name(self, name: str) -> Benchmark:
        """Set the display label."""
        self._config = self._config.replace(name=name)
        return self

    def run(self, work: Callable[..., Any], *args: Any, **kwargs: Any) -> BenchmarkResult:
        """Benchmark ``work``, binding ``args``/``kwargs`` to it first if given.

        Args:
            work: The callable to measure. Its return value (None included)
                is passed through the optimization barrier after every call.
            *args: Positional arguments bound to ``work``.
            **kwargs: Keyword arguments bound to ``work``.

        Returns:
            The result with statistics already calculated.
        """
        require(callable(work), f"Benchmark work must be callable; got {work!r}")
        if args or kwargs:
            work = partial(work, *args, **kwargs)

        config = self._config
        try:
            self._logger.debug(
                f"'{config.name}': warming up with {config.warmup_iterations} calls"
            )
            self._warmup_phase(work, config.warmup_iterations)
            total_ns = self._calibration_phase(work)
            count = adjust_iterations(
                total_ns, config.target_duration_ms, config.iterations
            )
            self._logger.debug(
                f"'{config.name}': calibration took {total_ns} ns for "
                f"{CALIBRATION_ITERATIONS} calls; measuring {count} iterations"
            )

            result = BenchmarkResult(
                name=config.name, time_unit=config.time_unit, capacity=count
            )
            self._measurement_phase(work, count, result)
            result.calculate_statistics(self._logger)
            return result
        finally:
            # The sink would otherwise keep the last work result alive.
            clobber()
            self._logger.flush()

    def _warmup_phase(self, work: Callable[[], Any], count: int) -> None:
        for _ in range(count):
            do_not_optimize(work())

    def _calibration_phase(self, work: Callable[[], Any]) -> int:
        start = time.perf_counter_ns()
        for _ in range(CALIBRATION_ITERATIONS):
            do_not_optimize(work())
        return time.perf_counter_ns() - start

    def _measurement_phase(
        self, work: Callable[[], Any], count: int, result: BenchmarkResult
    ) -> None:
        # Hoisted lookups keep per-iteration overhead out of the samples.
        clock = time.perf_counter_ns
        record = result.add_duration
        for _ in range(count):
            start = clock()
            do_not_optimize(work())
            end = clock()
            record(end - start)
        result.samples.freeze()


def benchmark(work: Callable[..., Any], *args: Any, **kwargs: Any) -> BenchmarkResult:
    """Run ``work`` under the default benchmark configuration."""
    return Benchmark().run(work, *args, **kwargs)
