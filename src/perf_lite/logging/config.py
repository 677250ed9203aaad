"""Log levels and logger configuration."""

from enum import IntEnum
from typing import Self

from msgspec import Struct


class LogLevel(IntEnum):
    """Severity of a log message, lowest first."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse a level from its case-insensitive name (eg 'debug')."""
        try:
            return cls[text.strip().upper()]
        except KeyError:
            raise ValueError(
                f"Invalid log level; expected one of {[lvl.name.lower() for lvl in cls]} "
                f"but got {text!r}"
            ) from None


class LoggerConfig(Struct):
    """Configuration for the benchmark logger.

    Mutable so the base level can be changed at runtime via
    Logger.set_log_level().

    Args:
        base_level: Messages below this level are dropped.
        do_stdout: Also echo flushed messages to stdout.
        str_format: ``%``-style format; supports %(asctime)s, %(levelname)s,
            %(name)s and must contain %(message)s.
        buffer_size: Messages held before a forced flush. Must be > 0.

    Raises:
        ValueError: If str_format lacks '%(message)s' or buffer_size <= 0.
    """

    base_level: LogLevel = LogLevel.INFO
    do_stdout: bool = False
    str_format: str = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
    buffer_size: int = 64

    def __post_init__(self):
        """Validate the format string and buffer size."""
        if "%(message)s" not in self.str_format:
            raise ValueError("Format string must contain '%(message)s' placeholder")
        if self.buffer_size <= 0:
            raise ValueError(
                f"Invalid buffer size; expected >0 but got {self.buffer_size}"
            )

    @classmethod
    def default(cls) -> Self:
        """Return INFO-level config buffering 64 messages, no stdout echo."""
        return cls()
