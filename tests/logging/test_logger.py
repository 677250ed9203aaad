"""Tests for the synchronous logger."""

import io

import pytest

from perf_lite.logging import (
    BaseLogHandler,
    Logger,
    LoggerConfig,
    LogLevel,
    MemoryLogHandler,
    StreamLogHandler,
    default_logger,
)


def make_logger(handler, base_level=LogLevel.INFO, buffer_size=4):
    config = LoggerConfig(base_level=base_level, buffer_size=buffer_size)
    return Logger(name="logger-basic", config=config, handlers=[handler])


class TestLoggerLoggingBehavior:
    """Test core logging behaviour and level filtering."""

    def test_info_buffered_until_flush(self) -> None:
        handler = MemoryLogHandler()
        logger = make_logger(handler)

        logger.info("hello world")
        assert handler.records == []

        logger.flush()
        assert len(handler.records) == 1
        assert "hello world" in handler.records[0]
        assert "[INFO] logger-basic" in handler.records[0]

    def test_full_buffer_flushes(self) -> None:
        handler = MemoryLogHandler()
        logger = make_logger(handler, buffer_size=2)

        logger.info("one")
        logger.info("two")
        assert [line.rsplit(" - ", 1)[1] for line in handler.records] == ["one", "two"]

    def test_warning_flushes_immediately(self) -> None:
        handler = MemoryLogHandler()
        logger = make_logger(handler)

        logger.info("before")
        logger.warning("careful")
        assert len(handler.records) == 2
        assert "careful" in handler.records[1]

    def test_level_filter_and_runtime_change(self) -> None:
        handler = MemoryLogHandler()
        logger = make_logger(handler, base_level=LogLevel.WARNING, buffer_size=1)

        logger.trace("hidden")
        logger.debug("hidden")
        logger.info("hidden")
        assert handler.records == []
        assert not logger.is_enabled_for(LogLevel.INFO)

        logger.set_log_level(LogLevel.TRACE)
        logger.trace("visible")
        assert any("visible" in line for line in handler.records)
        assert logger.get_config().base_level is LogLevel.TRACE

    def test_error_recorded(self) -> None:
        handler = MemoryLogHandler()
        make_logger(handler).error("bad")
        assert "[ERROR]" in handler.records[0]

    def test_stdout_echo(self, capsys) -> None:
        logger = Logger(
            name="echo",
            config=LoggerConfig(do_stdout=True, buffer_size=1),
        )
        logger.info("shown")
        assert "shown" in capsys.readouterr().out

    def test_flush_with_empty_buffer_is_noop(self) -> None:
        handler = MemoryLogHandler()
        make_logger(handler).flush()
        assert handler.records == []


class TestLoggerConstruction:
    """Test handler validation and accessors."""

    def test_rejects_non_handler(self) -> None:
        with pytest.raises(TypeError):
            Logger(handlers=[object()])

    def test_handlers_receive_config(self) -> None:
        handler = MemoryLogHandler()
        logger = make_logger(handler)
        assert handler.primary_config is logger.get_config()
        assert logger.get_handlers() == [handler]
        assert logger.get_name() == "logger-basic"

    def test_custom_handler(self) -> None:
        class RecordingHandler(BaseLogHandler):
            def __init__(self) -> None:
                super().__init__()
                self.invocations: list[tuple[str, ...]] = []

            def push(self, buffer: list[str]) -> None:
                self.invocations.append(tuple(buffer))

        handler = RecordingHandler()
        logger = make_logger(handler, buffer_size=1)
        logger.info("a")
        logger.info("b")
        assert len(handler.invocations) == 2

    def test_default_logger_is_shared_and_warns_to_stderr(self, capsys) -> None:
        logger = default_logger()
        assert logger is default_logger()
        assert logger.get_config().base_level is LogLevel.WARNING
        assert isinstance(logger.get_handlers()[0], StreamLogHandler)

        logger.info("suppressed")
        logger.warning("reported")
        err = capsys.readouterr().err
        assert "reported" in err
        assert "suppressed" not in err


class TestHandlers:
    """Test the bundled handlers."""

    def test_stream_handler(self) -> None:
        stream = io.StringIO()
        StreamLogHandler(stream).push(["a", "b"])
        assert stream.getvalue() == "a\nb\n"

    def test_memory_handler_clear(self) -> None:
        handler = MemoryLogHandler()
        handler.push(["x"])
        handler.clear()
        assert handler.records == []


class TestLoggerShutdown:
    """Test that shutdown drains the buffer and stops the logger."""

    def test_shutdown_flushes_default_sized_buffer(self) -> None:
        handler = MemoryLogHandler()
        logger = Logger(
            name="drain",
            config=LoggerConfig(base_level=LogLevel.DEBUG),
            handlers=[handler],
        )
        logger.debug("pending")
        assert handler.records == []

        logger.shutdown()
        assert len(handler.records) == 1
        assert "pending" in handler.records[0]
        assert not logger.is_running()

    def test_messages_after_shutdown_dropped(self) -> None:
        handler = MemoryLogHandler()
        logger = make_logger(handler, buffer_size=1)
        logger.shutdown()
        logger.error("late")
        logger.flush()
        assert handler.records == []

    def test_shutdown_closes_handlers(self) -> None:
        class ClosingHandler(MemoryLogHandler):
            def __init__(self) -> None:
                super().__init__()
                self.closed = False

            def close(self) -> None:
                self.closed = True

        handler = ClosingHandler()
        make_logger(handler).shutdown()
        assert handler.closed
