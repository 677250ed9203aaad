"""Report formatting for benchmark results.

Formatting only rounds for display; the values stored on the result are
never modified.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from perf_lite.units import unit_label, unit_precision

if TYPE_CHECKING:
    from perf_lite.result import BenchmarkResult


class BenchmarkReporter:
    """Formats a single benchmark result.

    Precision follows the result's time unit: finer units get more decimal
    places.

    Args:
        result: The result to format.
    """

    def __init__(self, result: BenchmarkResult) -> None:
        self.result = result

    def render(self) -> str:
        """Render the result as a multi-line block ending in a blank line.

        Returns:
            The formatted report.
        """
        result = self.result
        precision = unit_precision(result.time_unit)
        label = unit_label(result.time_unit)
        return (
            f"Benchmark: {result.name}\n"
            f"  Min:      {result.min_time:.{precision}f} {label}\n"
            f"  Mean:     {result.mean_time:.{precision}f} {label}\n"
            f"  StdDev:   {result.stddev_time:.{precision}f} {label}\n"
            f"  Ops/sec:  {result.ops_per_sec:.{precision}f}\n"
            "\n"
        )

    def print_report(self, file: TextIO | None = None) -> None:
        """Write the rendered report.

        Args:
            file: Output stream. Defaults to stdout.
        """
        print(self.render(), end="", file=file or sys.stdout)
