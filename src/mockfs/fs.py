"""High-level file system facade.

``FS`` wraps any ``FileManager`` (real or mock) and offers the
convenience operations application code actually wants: ``exists``,
``mkdirp``, ``ensure_file``, ``read_json`` and friends.  Swapping the
manager is all it takes to run the same code against the in-memory
tree::

    fs = FS(MockFileManager({"etc": {"app.json": '{"debug": true}'}}))
    fs.read_json("/etc/app.json")  # {"debug": True}

Every path is tilde-expanded before it reaches the manager.
"""

from __future__ import annotations

import json
import uuid
from collections.abc import Callable, Mapping
from pathlib import PurePosixPath
from typing import Any, TypeVar

from mockfs.paths import expand, extension, filename
from mockfs.protocols import FileManager

T = TypeVar("T")


class FSError(Exception):
    """Raise when a facade operation cannot complete."""


class ReadFailedError(FSError):
    """Raise when a file could not be read."""


class WriteFailedError(FSError):
    """Raise when a file could not be written."""


class FileCreationFailedError(FSError):
    """Raise when a file could not be created."""


class FS:
    """Convenience operations over a ``FileManager``."""

    def __init__(self, manager: FileManager) -> None:
        """Create a facade forwarding to *manager*."""
        self._manager = manager

    @property
    def manager(self) -> FileManager:
        """Return the underlying file manager."""
        return self._manager

    # -- Queries -------------------------------------------------------------

    def exists(self, path: str) -> bool:
        """Return True if an item exists at *path*."""
        return self._manager.file_exists(expand(path))

    def is_dir(self, path: str) -> bool:
        """Return True if *path* exists and is a directory."""
        exists, is_dir = self._manager.file_exists_is_dir(expand(path))
        return exists and is_dir

    def is_file(self, path: str) -> bool:
        """Return True if *path* exists and is not a directory."""
        exists, is_dir = self._manager.file_exists_is_dir(expand(path))
        return exists and not is_dir

    # -- Copy, move, remove --------------------------------------------------

    def copy(self, src: str, dst: str) -> None:
        """Copy an item to a new location."""
        self._manager.copy_item(expand(src), expand(dst))

    def move(self, src: str, dst: str) -> None:
        """Move an item to a new location."""
        self._manager.move_item(expand(src), expand(dst))

    def rename(self, old: str, new: str) -> None:
        """Rename an item in place.

        Only the base name of *new* is used; the item stays in its
        directory.  A file keeps its extension, so renaming
        ``/docs/notes.txt`` to ``todo`` gives ``/docs/todo.txt``.  Use
        ``move`` to change an extension.
        """
        old_path = expand(old)
        new_name = PurePosixPath(expand(new)).name
        if self.is_file(old_path):
            ext = extension(old_path)
            new_name = f"{filename(new_name)}.{ext}" if ext else filename(new_name)
        self._manager.move_item(old_path, str(PurePosixPath(old_path).with_name(new_name)))

    def remove(self, path: str) -> None:
        """Remove the item at *path* (directories recursively)."""
        self._manager.remove_item(expand(path))

    # -- Creation ------------------------------------------------------------

    def mkdir(self, path: str, attributes: Mapping[str, Any] | None = None) -> None:
        """Create a directory; its parent must already exist."""
        self._manager.create_directory(expand(path), False, attributes)  # noqa: FBT003

    def mkdirp(self, path: str, attributes: Mapping[str, Any] | None = None) -> None:
        """Create a directory and any missing parents, like ``mkdir -p``."""
        self._manager.create_directory(expand(path), True, attributes)  # noqa: FBT003

    def create(self, path: str, attributes: Mapping[str, Any] | None = None) -> bool:
        """Create an empty file; return whether it worked."""
        return self._manager.create_file(expand(path), None, attributes)

    def ensure_dir(self, path: str, attributes: Mapping[str, Any] | None = None) -> bool:
        """Make sure a directory exists, creating it (and parents) if needed.

        Returns:
            True if the directory already existed, False if it was created.

        """
        target = expand(path)
        if self.exists(target):
            return True
        self.mkdirp(target, attributes)
        return False

    def ensure_file(self, path: str, attributes: Mapping[str, Any] | None = None) -> bool:
        """Make sure a file exists, creating an empty one if needed.

        Returns:
            True if the file already existed, False if it was created.

        Raises:
            FileCreationFailedError: If the file could not be created.

        """
        target = expand(path)
        if self.exists(target):
            return True
        if not self.create(target, attributes):
            msg = f"Could not create file: {target}"
            raise FileCreationFailedError(msg)
        return False

    def empty_dir(self, path: str) -> None:
        """Make sure *path* is an empty directory, deleting its contents."""
        target = expand(path)
        if not self.ensure_dir(target):
            return
        for name in self._manager.contents_of_directory(target):
            self._manager.remove_item(str(PurePosixPath(target) / name))

    # -- Reading and writing ---------------------------------------------------

    def read_file(self, path: str) -> bytes:
        """Read a whole file.

        Raises:
            ReadFailedError: If *path* is missing or is a directory.

        """
        target = expand(path)
        data = self._manager.contents(target)
        if data is None:
            if self.is_file(target):
                return b""
            msg = f"Could not read file: {target}"
            raise ReadFailedError(msg)
        return data

    def write_file(self, path: str, data: bytes) -> None:
        """Write *data* to a file, replacing any existing file.

        The data goes to a staging file next to *path* first.  The old
        file is only removed once that write has succeeded, so a failed
        write leaves the tree as it was.

        Raises:
            WriteFailedError: If *path* is a directory or cannot be created.

        """
        target = expand(path)
        if self.is_dir(target):
            msg = f"Is a directory: {target}"
            raise WriteFailedError(msg)
        staging = f"{target}.{uuid.uuid4().hex}.tmp"
        if not self._manager.create_file(staging, data, None):
            msg = f"Could not write file: {target}"
            raise WriteFailedError(msg)
        if self.exists(target):
            self._manager.remove_item(target)
        self._manager.move_item(staging, target)

    def read_json(self, path: str, factory: Callable[[Any], T] | None = None) -> Any:
        """Read a file and decode it as JSON.

        Args:
            path: File to read.
            factory: Optional callable turning the decoded value into a
                richer type (e.g. a dataclass constructor wrapper).

        Raises:
            ReadFailedError: If the file cannot be read.
            json.JSONDecodeError: If the content is not valid JSON.

        """
        value = json.loads(self.read_file(path))
        return value if factory is None else factory(value)

    def write_json(
        self,
        path: str,
        value: Any,
        *,
        indent: int | None = None,
        default: Callable[[Any], Any] | None = None,
    ) -> None:
        """Encode *value* as JSON and write it to a file.

        Args:
            path: File to write.
            value: Object to encode.
            indent: Pretty-print indentation, as in ``json.dumps``.
            default: Fallback encoder for unsupported types.

        """
        self.write_file(path, json.dumps(value, indent=indent, default=default).encode("utf-8"))
