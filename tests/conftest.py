from collections.abc import Callable

import pytest

from perf_lite import Benchmark, Logger, LoggerConfig, LogLevel
from perf_lite.logging import MemoryLogHandler

# Short target keeps each measured run in the tens of milliseconds.
FAST_TARGET_MS = 5


def pytest_configure(config: pytest.Config) -> None:
    """Register shared markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture
def memory_handler() -> MemoryLogHandler:
    return MemoryLogHandler()


@pytest.fixture
def memory_logger(memory_handler: MemoryLogHandler) -> Logger:
    """Logger recording everything from DEBUG up into ``memory_handler``."""
    return Logger(
        name="test",
        config=LoggerConfig(base_level=LogLevel.DEBUG, buffer_size=1),
        handlers=[memory_handler],
    )


@pytest.fixture
def fast_benchmark(memory_logger: Logger) -> Callable[[], Benchmark]:
    """Return a factory for runners tuned to finish quickly."""

    def _fast_benchmark() -> Benchmark:
        return Benchmark(logger=memory_logger).warmup(2).target_duration(FAST_TARGET_MS)

    return _fast_benchmark
