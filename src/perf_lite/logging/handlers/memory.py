from perf_lite.logging.handlers.base import BaseLogHandler


class MemoryLogHandler(BaseLogHandler):
    """
    A log handler that keeps every pushed message in memory. Mostly
    useful for asserting on diagnostics in tests.
    """

    def __init__(self) -> None:
        super().__init__()
        self.records: list[str] = []

    def push(self, buffer: list[str]) -> None:
        self.records.extend(buffer)

    def clear(self) -> None:
        self.records.clear()
