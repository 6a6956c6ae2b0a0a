"""Tests for the audit log.

The logger records one structured entry per file manager operation, so
tests can assert on what the code under test did.
"""

from mockfs.logging import LogEntry, Logger, LogLevel


class TestLogLevel:
    """Verify log level ordering."""

    def test_levels_are_ordered(self) -> None:
        """DEBUG < INFO < WARNING < ERROR."""
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR


class TestLogEntry:
    """Verify log entry structure."""

    def test_path_defaults_to_empty(self) -> None:
        """Entries not tied to a path carry an empty one."""
        entry = LogEntry(level=LogLevel.INFO, message="ready", source="test")
        assert entry.path == ""

    def test_entry_str(self) -> None:
        """String form is ``[LEVEL] source: message``."""
        entry = LogEntry(
            level=LogLevel.WARNING,
            message="create failed",
            source="manager",
            path="/tmp/x",
        )
        assert str(entry) == "[WARNING] manager: create failed"


class TestLogger:
    """Verify the logger."""

    def test_log_stores_entries_in_order(self) -> None:
        """Entries are kept in chronological order."""
        logger = Logger()
        logger.log(LogLevel.INFO, "first", source="test")
        logger.log(LogLevel.INFO, "second", source="test", path="/a")
        assert [e.message for e in logger.entries] == ["first", "second"]
        assert logger.entries[1].path == "/a"
        expected_count = 2
        assert len(logger) == expected_count

    def test_entries_is_a_copy(self) -> None:
        """Mutating the returned list does not touch the log."""
        logger = Logger()
        logger.log(LogLevel.INFO, "kept", source="test")
        logger.entries.clear()
        assert len(logger) == 1

    def test_filter_by_level(self) -> None:
        """Only entries at or above the level are returned."""
        logger = Logger()
        logger.log(LogLevel.DEBUG, "debug msg", source="test")
        logger.log(LogLevel.INFO, "info msg", source="test")
        logger.log(LogLevel.ERROR, "error msg", source="test")
        warnings_and_above = logger.filter(min_level=LogLevel.WARNING)
        assert len(warnings_and_above) == 1
        assert warnings_and_above[0].level is LogLevel.ERROR

    def test_filter_by_source_and_path(self) -> None:
        """Source and path filters combine."""
        logger = Logger()
        logger.log(LogLevel.INFO, "a", source="manager", path="/a")
        logger.log(LogLevel.INFO, "b", source="manager", path="/b")
        logger.log(LogLevel.INFO, "c", source="other", path="/a")
        matched = logger.filter(source="manager", path="/a")
        assert [e.message for e in matched] == ["a"]

    def test_unfiltered_returns_copy(self) -> None:
        """Filtering with no criteria returns every entry as a new list."""
        logger = Logger()
        logger.log(LogLevel.INFO, "x", source="test")
        result = logger.filter()
        result.clear()
        assert len(logger) == 1

    def test_clear(self) -> None:
        """Clearing removes all entries."""
        logger = Logger()
        logger.log(LogLevel.INFO, "test", source="test")
        logger.clear()
        assert logger.entries == []
