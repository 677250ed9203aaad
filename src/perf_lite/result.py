"""Benchmark results and summary statistics."""

from __future__ import annotations

from typing import TextIO

import numpy as np
from numpy.typing import NDArray

from perf_lite.logging import Logger, default_logger
from perf_lite.reporting import BenchmarkReporter
from perf_lite.samples import SampleSet
from perf_lite.units import TimeUnit, ns_per_unit, to_unit

# Below this mean (in ns) throughput is reported as 0 instead of dividing.
_MIN_MEAN_NS = 1e-9


class BenchmarkResult:
    """Raw samples of one benchmark run plus the statistics derived from them.

    All statistics are 0.0 until calculate_statistics() runs. Times are
    expressed in ``time_unit``, except ``ops_per_sec`` which is always
    derived from the nanosecond mean.

    Args:
        name: Display label of the benchmark.
        time_unit: Unit the statistics are expressed in.
        capacity: Number of samples to pre-allocate room for.
    """

    def __init__(
        self,
        name: str = "",
        time_unit: TimeUnit = TimeUnit.NANOSECONDS,
        capacity: int = 0,
    ) -> None:
        self.name = name
        self.time_unit = time_unit
        self.min_time = 0.0
        self.mean_time = 0.0
        self.stddev_time = 0.0
        self.ops_per_sec = 0.0
        self._samples = SampleSet(capacity)

    def __repr__(self) -> str:
        return (
            f"BenchmarkResult(name={self.name!r}, time_unit={self.time_unit.name}, "
            f"samples={len(self._samples)}, min_time={self.min_time}, "
            f"mean_time={self.mean_time}, stddev_time={self.stddev_time}, "
            f"ops_per_sec={self.ops_per_sec})"
        )

    @property
    def durations(self) -> NDArray[np.float64]:
        """Read-only view of the raw samples, in nanoseconds."""
        return self._samples.as_array()

    @property
    def samples(self) -> SampleSet:
        return self._samples

    def add_duration(self, interval_ns: float) -> None:
        """Append one raw sample, in nanoseconds."""
        self._samples.append(interval_ns)

    def calculate_statistics(self, logger: Logger | None = None) -> None:
        """Derive min, mean, sample stddev and ops/sec from the raw samples.

        Sums are taken over raw nanoseconds before conversion so coarse
        units do not compound rounding error. With no samples, a warning is
        logged and every statistic stays at 0.0.

        Args:
            logger: Destination for the empty-sample diagnostic. Defaults to
                the library logger.
        """
        if self._samples.is_empty:
            (logger or default_logger()).warning(
                f"No durations recorded for benchmark '{self.name}'"
            )
            return

        raw = self._samples.as_array()
        count = raw.shape[0]
        total_ns = float(np.sum(raw))

        self.min_time = to_unit(float(np.min(raw)), self.time_unit)
        self.mean_time = to_unit(total_ns, self.time_unit) / count

        if count > 1:
            deviations = raw / ns_per_unit(self.time_unit) - self.mean_time
            variance = float(np.dot(deviations, deviations)) / (count - 1)
            self.stddev_time = float(np.sqrt(variance))
        else:
            self.stddev_time = 0.0

        mean_ns = total_ns / count
        self.ops_per_sec = 1e9 / mean_ns if mean_ns > _MIN_MEAN_NS else 0.0

    def render(self) -> str:
        """Human readable summary of the statistics."""
        return BenchmarkReporter(self).render()

    def print(self, file: TextIO | None = None) -> None:
        """Write the summary to ``file`` (stdout by default)."""
        BenchmarkReporter(self).print_report(file)
