"""Synchronous buffered logger."""

from datetime import datetime, timezone

from perf_lite.logging.config import LoggerConfig, LogLevel
from perf_lite.logging.handlers import BaseLogHandler, StreamLogHandler


def _time_iso8601() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds")


class Logger:
    """A simple logger that buffers messages and pushes them to configured
    handlers once the buffer fills, on flush(), or immediately for
    warnings and errors.

    Nothing here runs on a background thread, so logging never competes
    with a benchmark for CPU time.
    """

    def __init__(
        self,
        name: str = "",
        config: LoggerConfig | None = None,
        handlers: list[BaseLogHandler] | None = None,
    ):
        """Initializes a Logger with specified configuration and handlers.

        Args:
            name (str): Name of the logger. Defaults to an empty string.
            config (LoggerConfig): Configuration settings for the logger (base level, stdout, buffer size, etc.).
            handlers (list[BaseLogHandler], optional): A list of handler objects that inherit from BaseLogHandler.
                Defaults to an empty list if not provided.

        Raises:
            TypeError: If one of the provided handlers does not inherit from BaseLogHandler.

        """
        self._name = name

        self._config = config
        if self._config is None:
            self._config = LoggerConfig()

        self._handlers = handlers
        if self._handlers is None:
            self._handlers = []

        for handler in self._handlers:
            if not isinstance(handler, BaseLogHandler):
                raise TypeError(
                    f"Invalid handler class; expected BaseLogHandler but got {type(handler).__name__}"
                )
            handler.add_primary_config(self._config)

        self._buffer: list[str] = []
        self._is_running = True

    def flush(self) -> None:
        """Flushes the log message buffer to all handlers."""
        if not self._buffer:
            return

        if self._config.do_stdout:
            for line in self._buffer:
                print(line)

        for handler in self._handlers:
            handler.push(self._buffer)

        self._buffer = []

    def _process_log(self, level: LogLevel, msg: str) -> None:
        """Formats a log message and buffers it if it meets the base level.

        Args:
            level (LogLevel): The severity level of the message.
            msg (str): The actual log message.

        """
        if not self._is_running or level < self._config.base_level:
            return

        log_msg = self._config.str_format % {
            "asctime": _time_iso8601(),
            "name": self._name,
            "levelname": level.name,
            "message": msg,
        }
        self._buffer.append(log_msg)

        if level >= LogLevel.WARNING or len(self._buffer) >= self._config.buffer_size:
            self.flush()

    def set_log_level(self, level: LogLevel) -> None:
        """Modify the logger's base log level at runtime.

        Args:
            level (LogLevel): The new base log level.

        """
        self.debug(f"Changing base log level from {self._config.base_level.name} to {level.name}")
        self._config.base_level = level
        for handler in self._handlers:
            handler.add_primary_config(self._config)

    def trace(self, msg: str) -> None:
        """Send a trace-level log message."""
        self._process_log(LogLevel.TRACE, msg)

    def debug(self, msg: str) -> None:
        """Send a debug-level log message."""
        self._process_log(LogLevel.DEBUG, msg)

    def info(self, msg: str) -> None:
        """Send an info-level log message."""
        self._process_log(LogLevel.INFO, msg)

    def warning(self, msg: str) -> None:
        """Send a warning-level log message."""
        self._process_log(LogLevel.WARNING, msg)

    def error(self, msg: str) -> None:
        """Send an error-level log message."""
        self._process_log(LogLevel.ERROR, msg)

    def shutdown(self) -> None:
        """Flushes any buffered messages, closes handlers and stops accepting new ones."""
        self.flush()
        for handler in self._handlers:
            handler.close()
        self._is_running = False

    def is_running(self) -> bool:
        """Check if the logger is still accepting messages."""
        return self._is_running

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check whether a message at ``level`` would be recorded."""
        return level >= self._config.base_level

    def get_name(self) -> str:
        """Get the name of the logger."""
        return self._name

    def get_config(self) -> LoggerConfig:
        """Get the configuration of the logger."""
        return self._config

    def get_handlers(self) -> list[BaseLogHandler]:
        """Get the handlers attached to the logger."""
        return self._handlers


_default_logger: Logger | None = None


def default_logger() -> Logger:
    """Return the shared library logger, which writes warnings to stderr."""
    global _default_logger
    if _default_logger is None:
        _default_logger = Logger(
            name="perf_lite",
            config=LoggerConfig(base_level=LogLevel.WARNING),
            handlers=[StreamLogHandler()],
        )
    return _default_logger
