"""Lightweight micro-benchmarking harness."""

from .barrier import (
    do_not_optimize as do_not_optimize,
)
from .config import (
    BenchmarkConfig as BenchmarkConfig,
)
from .errors import (
    ContractViolation as ContractViolation,
)
from .logging import (
    Logger as Logger,
)
from .logging import (
    LoggerConfig as LoggerConfig,
)
from .logging import (
    LogLevel as LogLevel,
)
from .reporting import (
    BenchmarkReporter as BenchmarkReporter,
)
from .result import (
    BenchmarkResult as BenchmarkResult,
)
from .runner import (
    Benchmark as Benchmark,
)
from .runner import (
    benchmark as benchmark,
)
from .samples import (
    SampleSet as SampleSet,
)
from .units import (
    TimeUnit as TimeUnit,
)
from .units import (
    to_unit as to_unit,
)

__all__ = [
    # Runner
    "Benchmark",
    "BenchmarkConfig",
    "benchmark",
    # Results
    "BenchmarkResult",
    "BenchmarkReporter",
    "SampleSet",
    # Units & barrier
    "TimeUnit",
    "to_unit",
    "do_not_optimize",
    # Errors
    "ContractViolation",
    # Logging
    "Logger",
    "LoggerConfig",
    "LogLevel",
]
