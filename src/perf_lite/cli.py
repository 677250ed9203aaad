"""Demo command-line interface.

Benchmarks a couple of built-in workloads and prints the results:

    python -m perf_lite --unit us --target-ms 50
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from typing import Any

from perf_lite.logging import (
    BaseLogHandler,
    FileLogHandler,
    Logger,
    LoggerConfig,
    LogLevel,
    StreamLogHandler,
)
from perf_lite.runner import Benchmark
from perf_lite.units import TimeUnit, parse_unit


def _noop() -> None:
    pass


def _value() -> int:
    x = 0
    return x + 1


WORKLOADS: dict[str, Callable[[], Any]] = {
    "noop": _noop,
    "value": _value,
}


class BenchmarkCLI:
    """Builder for the demo command-line interface.

    Args:
        description: Program description for --help.
    """

    def __init__(self, description: str) -> None:
        self.parser = argparse.ArgumentParser(prog="perf_lite", description=description)
        self._add_common_args()

    def _add_common_args(self) -> None:
        """Add the runner configuration arguments."""
        self.parser.add_argument(
            "--warmup",
            "-w",
            type=int,
            default=10,
            help="Number of warmup iterations (default: 10)",
        )
        self.parser.add_argument(
            "--iterations",
            "-n",
            type=int,
            default=1_000,
            help="Fallback iteration count if calibration fails (default: 1,000)",
        )
        self.parser.add_argument(
            "--target-ms",
            "-t",
            type=int,
            default=100,
            help="Approximate measurement duration in milliseconds (default: 100)",
        )
        self.parser.add_argument(
            "--unit",
            "-u",
            type=parse_unit,
            default=TimeUnit.NANOSECONDS,
            help="Output time unit: ns, us, ms or s (default: ns)",
        )

    def add_workload_arg(self) -> BenchmarkCLI:
        """Add --workload selecting which built-in workloads to run.

        Returns:
            Self for method chaining.
        """
        self.parser.add_argument(
            "--workload",
            choices=[*WORKLOADS, "all"],
            default="all",
            help="Workload to benchmark (default: all)",
        )
        return self

    def add_logging_args(self) -> BenchmarkCLI:
        """Add --log-level and --log-file.

        Returns:
            Self for method chaining.
        """
        self.parser.add_argument(
            "--log-level",
            "-l",
            type=LogLevel.parse,
            default=LogLevel.WARNING,
            help="Minimum log level: trace, debug, info, warning or error (default: warning)",
        )
        self.parser.add_argument(
            "--log-file",
            default=None,
            help="Also append logs to this .txt or .log file",
        )
        return self

    def parse(self, argv: Sequence[str] | None = None) -> argparse.Namespace:
        """Parse command-line arguments, rejecting non-positive counts.

        Returns:
            Parsed arguments namespace.
        """
        args = self.parser.parse_args(argv)
        for option in ("warmup", "iterations", "target_ms"):
            if getattr(args, option) <= 0:
                self.parser.error(f"--{option.replace('_', '-')} must be greater than zero")
        return args


def build_logger(log_level: LogLevel, log_file: str | None = None) -> Logger:
    """Logger writing to stderr and, when given, appending to ``log_file``."""
    handlers: list[BaseLogHandler] = [StreamLogHandler()]
    if log_file is not None:
        handlers.append(FileLogHandler(log_file, create=True))
    return Logger(
        name="perf_lite",
        config=LoggerConfig(base_level=log_level),
        handlers=handlers,
    )


def main(argv: Sequence[str] | None = None) -> int:
    cli = BenchmarkCLI("Run perf_lite demo benchmarks.").add_workload_arg().add_logging_args()
    args = cli.parse(argv)
    try:
        logger = build_logger(args.log_level, args.log_file)
    except ValueError as exc:
        cli.parser.error(str(exc))

    names = list(WORKLOADS) if args.workload == "all" else [args.workload]
    try:
        for name in names:
            result = (
                Benchmark(logger=logger)
                .warmup(args.warmup)
                .iterations(args.iterations)
                .target_duration(args.target_ms)
                .unit(args.unit)
                .name(name)
                .run(WORKLOADS[name])
            )
            result.print()
    finally:
        logger.shutdown()
    return 0
