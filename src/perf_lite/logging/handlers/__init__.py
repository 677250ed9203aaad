from .base import BaseLogHandler as BaseLogHandler
from .file import FileLogHandler as FileLogHandler
from .memory import MemoryLogHandler as MemoryLogHandler
from .stream import StreamLogHandler as StreamLogHandler

__all__ = [
    "BaseLogHandler",
    "FileLogHandler",
    "MemoryLogHandler",
    "StreamLogHandler",
]
