"""Benchmark configuration."""

from typing import Any, Self

from msgspec import Struct, structs

from perf_lite.errors import require
from perf_lite.units import TimeUnit


def _is_positive_count(value: Any) -> bool:
    # bool is an int subclass but never a meaningful count.
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class BenchmarkConfig(Struct, frozen=True):
    """Immutable configuration consumed by the benchmark runner.

    Args:
        warmup_iterations: Unmeasured calls before calibration. Must be > 0.
        iterations: Initial measured-iteration count, used unmodified only
            when calibration cannot time the workload. Must be > 0.
        target_duration_ms: Approximate wall time the measurement phase
            should fill, in milliseconds. Must be > 0.
        time_unit: Unit the statistics are expressed in.
        name: Display label.

    Raises:
        ContractViolation: If any of the above constraints is broken.
    """

    warmup_iterations: int = 10
    iterations: int = 1000
    target_duration_ms: int = 100
    time_unit: TimeUnit = TimeUnit.NANOSECONDS
    name: str = "Benchmark"

    def __post_init__(self):
        """Validate all fields eagerly."""
        require(
            _is_positive_count(self.warmup_iterations),
            f"Warmup iterations must be greater than zero; got {self.warmup_iterations!r}",
        )
        require(
            _is_positive_count(self.iterations),
            f"Benchmark iterations must be greater than zero; got {self.iterations!r}",
        )
        require(
            _is_positive_count(self.target_duration_ms),
            f"Target duration must be greater than zero; got {self.target_duration_ms!r}",
        )
        require(
            isinstance(self.time_unit, TimeUnit),
            f"Invalid time unit; expected TimeUnit but got {self.time_unit!r}",
        )
        require(
            isinstance(self.name, str),
            f"Benchmark name must be a string; got {type(self.name).__name__}",
        )

    @classmethod
    def default(cls) -> Self:
        """Return the default configuration (10 warmup, 1000 iterations, 100ms, ns)."""
        return cls()

    @property
    def target_duration_ns(self) -> int:
        """Target duration converted to nanoseconds."""
        return self.target_duration_ms * 1_000_000

    def replace(self, **changes: Any) -> Self:
        """Return a validated copy with ``changes`` applied."""
        fields = structs.asdict(self)
        fields.update(changes)
        return type(self)(**fields)
