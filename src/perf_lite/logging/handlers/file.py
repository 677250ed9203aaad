from pathlib import Path
from typing import TextIO

from perf_lite.logging.handlers.base import BaseLogHandler

_SUFFIXES = (".txt", ".log")


class FileLogHandler(BaseLogHandler):
    """
    A log handler that appends benchmark logs to a text file.

    The file is opened lazily on the first push and kept open until
    close(), so repeated flushes during a run do not reopen it.
    """

    def __init__(self, filepath: str | Path, create: bool = False) -> None:
        """
        Args:
            filepath (str | Path): Target file; must end with '.txt' or '.log'.
            create (bool): Create the file and any missing parent directories now.

        Raises:
            ValueError: If the suffix is not '.txt' or '.log'.
        """
        super().__init__()

        self.filepath = Path(filepath)
        if self.filepath.suffix not in _SUFFIXES:
            raise ValueError(
                f"Invalid filepath; expected suffix in {_SUFFIXES} but got {str(self.filepath)!r}"
            )

        if create:
            self.filepath.parent.mkdir(parents=True, exist_ok=True)
            self.filepath.touch(exist_ok=True)

        self._file: TextIO | None = None

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def push(self, buffer: list[str]) -> None:
        if self._file is None:
            self._file = self.filepath.open("a", encoding="utf-8")
        self._file.write("\n".join(buffer) + "\n")
        self._file.flush()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
