"""Tests for the file log handler."""

import pytest

from perf_lite.logging import FileLogHandler, Logger, LoggerConfig


class TestFileLogHandler:
    """Test appending logs to text files."""

    def test_requires_text_suffix(self, tmp_path) -> None:
        with pytest.raises(ValueError):
            FileLogHandler(tmp_path / "log.json")

    def test_accepts_log_suffix(self, tmp_path) -> None:
        handler = FileLogHandler(str(tmp_path / "bench.log"))
        assert handler.filepath.name == "bench.log"

    def test_creates_missing_file(self, tmp_path) -> None:
        path = tmp_path / "nested" / "log.txt"
        FileLogHandler(path, create=True)
        assert path.exists()

    def test_opens_lazily_and_closes(self, tmp_path) -> None:
        handler = FileLogHandler(tmp_path / "log.txt")
        assert not handler.is_open
        handler.push(["a"])
        assert handler.is_open
        handler.close()
        assert not handler.is_open
        handler.close()

    def test_appends_across_reopen(self, tmp_path) -> None:
        path = tmp_path / "log.txt"
        handler = FileLogHandler(path)
        handler.push(["first"])
        handler.close()
        handler.push(["second"])
        handler.close()
        assert path.read_text().splitlines() == ["first", "second"]

    def test_logger_shutdown_writes_and_closes(self, tmp_path) -> None:
        path = tmp_path / "log.txt"
        handler = FileLogHandler(path, create=True)
        logger = Logger(name="file", handlers=[handler])

        logger.info("first")
        logger.info("second")
        assert path.read_text() == ""

        logger.shutdown()
        lines = path.read_text().splitlines()
        assert len(lines) == 2
        assert lines[0].endswith("first")
        assert lines[1].endswith("second")
        assert not handler.is_open
