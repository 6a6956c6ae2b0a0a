"""The file manager capability interface.

Code that needs a file system should depend on ``FileManager`` rather
than on a concrete backend.  Two implementations satisfy it
structurally (duck typing):

- ``mockfs.manager.MockFileManager``: the in-memory emulation.
- ``mockfs.real.RealFileManager``: the real disk.

Both raise ``FileNotFoundError`` / ``FileExistsError`` /
``NotADirectoryError`` (or subclasses) for the same conditions, so
callers can switch backends without touching their error handling.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class FileManager(Protocol):
    """Protocol for path-based file system operations."""

    def file_exists(self, path: str) -> bool:
        """Check if an item exists at *path*.

        Args:
            path: Path to check.

        Returns:
            True if something exists there, False otherwise.

        """
        ...

    def file_exists_is_dir(self, path: str) -> tuple[bool, bool]:
        """Check if an item exists at *path* and whether it is a directory.

        Args:
            path: Path to check.

        Returns:
            ``(exists, is_directory)``; ``is_directory`` is False when
            nothing exists.

        """
        ...

    def copy_item(self, src_path: str, dst_path: str) -> None:
        """Copy a file or directory tree.

        Args:
            src_path: Item to copy.
            dst_path: Full destination path, including the new name.

        Raises:
            FileNotFoundError: If the source or destination parent is missing.
            FileExistsError: If the destination already exists.

        """
        ...

    def move_item(self, src_path: str, dst_path: str) -> None:
        """Move a file or directory tree.

        Args:
            src_path: Item to move.
            dst_path: Full destination path, including the new name.

        Raises:
            FileNotFoundError: If the source or destination parent is missing.
            FileExistsError: If the destination already exists.

        """
        ...

    def remove_item(self, path: str) -> None:
        """Remove a file or a whole directory tree.

        Args:
            path: Item to remove.

        Raises:
            FileNotFoundError: If nothing exists at *path*.

        """
        ...

    def create_directory(
        self,
        path: str,
        with_intermediate_directories: bool = False,  # noqa: FBT001, FBT002
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        """Create a directory.

        Args:
            path: Directory to create.
            with_intermediate_directories: Create missing parents too,
                and succeed if the directory already exists.
            attributes: Backend-specific options; may be ignored.

        """
        ...

    def create_file(
        self,
        path: str,
        content: bytes | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> bool:
        """Create a file, reporting failure as False instead of raising.

        Args:
            path: File to create.
            content: Initial content, or None for an empty file.
            attributes: Backend-specific options; may be ignored.

        Returns:
            True if the file was created.

        """
        ...

    def contents_of_directory(self, path: str) -> list[str]:
        """List the names inside a directory (order unspecified).

        Args:
            path: Directory to list.

        Raises:
            FileNotFoundError: If nothing exists at *path*.
            NotADirectoryError: If *path* is a file.

        """
        ...

    def contents(self, path: str) -> bytes | None:
        """Read a whole file.

        Args:
            path: File to read.

        Returns:
            The content, or None if *path* is missing or not a file.

        """
        ...
