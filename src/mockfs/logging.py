"""Audit log for file manager operations.

A test that swaps the in-memory manager in for the real disk usually
asserts on the resulting tree.  Sometimes it also needs to assert on
what the code under test *did*: which directories it created, what it
removed, which writes failed.  Pass a ``Logger`` to the manager and it
appends one ``LogEntry`` per mutating operation::

    log = Logger()
    fm = MockFileManager(logger=log)
    fm.create_directory("/var/cache", True)
    [str(e) for e in log.entries]
    # ["[INFO] manager: mkdir /var", "[INFO] manager: mkdir /var/cache"]

Entries carry the path they are about, so ``filter(path=...)`` answers
"what happened to this file?" directly.
"""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """How much an entry matters; higher values are more severe."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """One recorded operation.

    Attributes:
        level: DEBUG for navigation, INFO for mutations, WARNING for
            best-effort operations that failed.
        message: The operation and its operands, e.g. ``"remove /tmp/x"``.
        source: The component that recorded it (the manager uses "manager").
        path: The path the operation acted on; empty if none.

    """

    level: LogLevel
    message: str
    source: str
    path: str = ""

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``."""
        return f"[{self.level.name}] {self.source}: {self.message}"


class Logger:
    """Chronological record of ``LogEntry`` objects.

    Entries can only be appended or cleared all at once.
    """

    def __init__(self) -> None:
        """Create a logger with no entries."""
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return a copy of every entry, oldest first."""
        return list(self._entries)

    def log(
        self,
        level: LogLevel,
        message: str,
        *,
        source: str,
        path: str = "",
    ) -> None:
        """Record one entry.

        Args:
            level: Severity of the entry.
            message: What was done.
            source: Who did it.
            path: What it was done to.

        """
        self._entries.append(LogEntry(level=level, message=message, source=source, path=path))

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
        path: str | None = None,
    ) -> list[LogEntry]:
        """Return the entries that pass every criterion given.

        Omitted criteria match everything, so ``filter()`` with no
        arguments is the same as ``entries``.

        Args:
            min_level: Drop entries below this severity.
            source: Keep only entries recorded by this component.
            path: Keep only entries about exactly this path.

        """
        return [
            entry
            for entry in self._entries
            if (min_level is None or entry.level >= min_level)
            and (source is None or entry.source == source)
            and (path is None or entry.path == path)
        ]

    def clear(self) -> None:
        """Forget every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._entries)
