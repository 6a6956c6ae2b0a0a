"""In-memory file system emulation for tests.

Re-exports public symbols so callers can write::

    from mockfs import FS, MockFileManager, RealFileManager
"""

from mockfs.errors import (
    InvalidNameError,
    InvalidPathError,
    MockFSError,
    NodeExistsError,
    NodeNotFoundError,
    NotADirError,
)
from mockfs.fs import FS, FileCreationFailedError, FSError, ReadFailedError, WriteFailedError
from mockfs.logging import LogEntry, Logger, LogLevel
from mockfs.manager import MockFileManager
from mockfs.node import Node, NodeType
from mockfs.protocols import FileManager
from mockfs.real import RealFileManager

__all__ = [
    "FS",
    "FSError",
    "FileCreationFailedError",
    "FileManager",
    "InvalidNameError",
    "InvalidPathError",
    "LogEntry",
    "LogLevel",
    "Logger",
    "MockFSError",
    "MockFileManager",
    "Node",
    "NodeExistsError",
    "NodeNotFoundError",
    "NodeType",
    "NotADirError",
    "ReadFailedError",
    "RealFileManager",
    "WriteFailedError",
]
