"""Module de logging."""

from inichain.logging.base import Logger
from inichain.logging.file_logger import FileLogger
from inichain.logging.std_logger import StdLogger

__all__ = [
    "Logger",
    "FileLogger",
    "StdLogger",
]
