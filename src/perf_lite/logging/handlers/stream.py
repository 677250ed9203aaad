import sys
from typing import TextIO

from perf_lite.logging.handlers.base import BaseLogHandler


class StreamLogHandler(BaseLogHandler):
    """
    A log handler that writes log messages to a text stream.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        """
        Args:
            stream (TextIO, optional): Destination stream. Resolved to the
                current ``sys.stderr`` at push time when not given.
        """
        super().__init__()
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def push(self, buffer: list[str]) -> None:
        stream = self.stream
        for line in buffer:
            stream.write(line + "\n")
        stream.flush()
