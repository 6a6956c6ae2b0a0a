"""In-memory file manager: path resolution and tree mutation.

``MockFileManager`` is a drop-in stand-in for a real file system in
tests.  It owns a node tree (see ``mockfs.node``) and a *current
directory*, and turns path strings into tree operations:

- **Resolution**: a path starting with ``/`` is walked from the root,
  anything else from the current directory.  Empty segments are
  ignored, so ``//home///dev/`` is the same as ``/home/dev``.  A ``..``
  segment climbs to the parent; at the root it stays put.

- **Mutation**: once a path has resolved, the operation is a single
  structural change: insert a child, detach a child, or deep-copy a
  subtree.  If resolution fails nothing is touched.

- **Errors**: failures raise the typed errors from ``mockfs.errors``,
  which are also ``FileNotFoundError`` / ``FileExistsError`` /
  ``NotADirectoryError`` like their real-disk counterparts.

``move_item`` is a copy followed by a remove.  The two steps are not
atomic: if the remove fails, the copy stays in place.

The manager is not thread-safe; use one instance per test.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from mockfs.errors import (
    InvalidNameError,
    InvalidPathError,
    MockFSError,
    NodeExistsError,
    NodeNotFoundError,
    NotADirError,
)
from mockfs.logging import Logger, LogLevel
from mockfs.node import SEPARATOR, Node

PARENT_DIR = ".."

_SOURCE = "manager"


def _segments(path: str) -> list[str]:
    """Split *path* on the separator, dropping empty segments."""
    return [part for part in path.split(SEPARATOR) if part]


def _is_absolute(path: str) -> bool:
    return path.startswith(SEPARATOR)


def _split_destination(path: str) -> tuple[str, str]:
    """Split a path into ``(parent_path, name)``.

    The path needs at least two non-empty segments; a leading ``/`` is
    kept on the parent so absolute paths stay absolute::

        "/home/dev/index.sh" → ("/home/dev", "index.sh")
        "home/notes"         → ("home", "notes")
        "/notes"             → InvalidPathError

    Raises:
        InvalidPathError: If there is no separable parent and name.

    """
    parts = _segments(path)
    if len(parts) < 2:  # noqa: PLR2004
        raise InvalidPathError(path)
    prefix = SEPARATOR if _is_absolute(path) else ""
    return prefix + SEPARATOR.join(parts[:-1]), parts[-1]


def _is_name_valid(name: str) -> bool:
    return SEPARATOR not in name


class MockFileManager:
    """An in-memory file manager with a current working directory.

    The tree starts empty (just the root) unless a nested mapping is
    given, in which case string values become files and mappings become
    directories::

        fm = MockFileManager({"home": {"README.md": "# Home"}})
        fm.contents("/home/README.md")  # b"# Home"
    """

    def __init__(
        self,
        structure: Mapping[str, Any] | None = None,
        *,
        logger: Logger | None = None,
    ) -> None:
        """Create a manager whose current directory is the root.

        Args:
            structure: Optional nested mapping used to populate the root.
            logger: Optional audit log receiving one entry per operation.

        """
        self._root = Node.root()
        self._cwd = self._root
        self._logger = logger
        if structure is not None:
            self._root.populate(structure)

    @classmethod
    def from_json(cls, data: str | bytes, *, logger: Logger | None = None) -> MockFileManager:
        """Create a manager from a JSON document describing the tree.

        The top level must be an object.  Only strings (files) and
        objects (directories) are accepted below it.

        Raises:
            json.JSONDecodeError: If *data* is not valid JSON.
            TypeError: If the document holds any other JSON type.

        """
        structure = json.loads(data)
        if not isinstance(structure, dict):
            msg = f"Expected a JSON object, got {type(structure).__name__}"
            raise TypeError(msg)
        return cls(structure, logger=logger)

    # -- Session state -------------------------------------------------------

    @property
    def root(self) -> Node:
        """Return the root node of the tree."""
        return self._root

    @property
    def current_directory(self) -> Node:
        """Return the node relative paths are resolved against."""
        return self._cwd

    @property
    def logger(self) -> Logger | None:
        """Return the audit log, if one was supplied."""
        return self._logger

    def cd(self, path: str) -> None:
        """Change the current directory.

        Raises:
            NodeNotFoundError: If *path* does not resolve.

        """
        self._cwd = self._resolve(path)
        self._log(LogLevel.DEBUG, f"cd {self._cwd.path}", self._cwd.path)

    def pwd(self) -> str:
        """Return the absolute path of the current directory."""
        return self._cwd.path

    # -- Direct insertion ----------------------------------------------------

    def add_directory(self, path: str, name: str) -> None:
        """Create an empty directory called *name* inside *path*.

        Raises:
            InvalidNameError: If *name* contains a separator.
            NodeNotFoundError: If *path* does not resolve.
            NotADirError: If *path* is a file.
            NodeExistsError: If *name* is already taken.

        """
        if not _is_name_valid(name):
            raise InvalidNameError(name)
        parent = self._resolve(path)
        self._insert(Node.directory(name, parent), parent)
        self._log(LogLevel.INFO, f"mkdir {parent.child_path(name)}", parent.child_path(name))

    def add_file(self, path: str, name: str, content: bytes | None = None) -> None:
        """Create a file called *name* inside *path*.

        Raises:
            InvalidNameError: If *name* contains a separator.
            NodeNotFoundError: If *path* does not resolve.
            NotADirError: If *path* is a file.
            NodeExistsError: If *name* is already taken.

        """
        if not _is_name_valid(name):
            raise InvalidNameError(name)
        parent = self._resolve(path)
        self._insert(Node.file(name, parent, content), parent)
        self._log(LogLevel.INFO, f"create {parent.child_path(name)}", parent.child_path(name))

    # -- File manager interface ----------------------------------------------

    def file_exists(self, path: str) -> bool:
        """Return True if *path* resolves to a node."""
        try:
            self._resolve(path)
        except MockFSError:
            return False
        return True

    def file_exists_is_dir(self, path: str) -> tuple[bool, bool]:
        """Return ``(exists, is_directory)`` for *path*.

        ``is_directory`` is always False when the path does not exist.
        """
        try:
            node = self._resolve(path)
        except MockFSError:
            return False, False
        return True, node.is_directory

    def copy_item(self, src_path: str, dst_path: str) -> None:
        """Deep-copy the node at *src_path* to *dst_path*.

        *dst_path* is the full destination, including the new name.  The
        copy shares no nodes with the source.

        Raises:
            NodeNotFoundError: If the source or the destination's parent
                does not resolve.
            InvalidPathError: If *dst_path* has no separable parent and name.
            NotADirError: If the destination's parent is a file.
            NodeExistsError: If the destination name is taken.

        """
        node = self._resolve(src_path)
        dest_dir, dest_name = _split_destination(dst_path)
        dest_node = self._resolve(dest_dir)
        self._insert(node.copy(name=dest_name, parent=dest_node), dest_node)
        self._log(LogLevel.INFO, f"copy {node.path} -> {dest_node.child_path(dest_name)}", node.path)

    def move_item(self, src_path: str, dst_path: str) -> None:
        """Move the node at *src_path* to *dst_path* (copy, then remove).

        Raises:
            MockFSError: Anything ``copy_item`` or ``remove_item`` raises.
                A failed remove leaves the copy in place.

        """
        self.copy_item(src_path, dst_path)
        self.remove_item(src_path)

    def remove_item(self, path: str) -> None:
        """Detach the node at *path* (and its whole subtree) from its parent.

        Raises:
            NodeNotFoundError: If *path* does not resolve.
            InvalidPathError: If *path* resolves to the root.

        """
        node = self._resolve(path)
        if node.is_root:
            raise InvalidPathError(path, "cannot remove the root directory")
        del node.parent.children[node.name]
        self._log(LogLevel.INFO, f"remove {node.path}", node.path)

    def create_directory(
        self,
        path: str,
        with_intermediate_directories: bool = False,  # noqa: FBT001, FBT002
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        """Create a directory at *path*.

        Without intermediates the parent must already exist and the name
        must be free.  With intermediates every missing directory along
        the way is created and existing ones are reused, so repeating the
        call is a no-op.  The whole walk is checked before anything is
        created, so a failure leaves the tree unchanged.  *attributes*
        are accepted and ignored.

        Raises:
            InvalidPathError: Without intermediates, if *path* has no
                separable parent and name.
            NodeNotFoundError: Without intermediates, if the parent is missing.
            NodeExistsError: If the name is taken (without intermediates) or
                is taken by a file (with intermediates).
            NotADirError: With intermediates, if a segment before the last
                is a file.

        """
        if not with_intermediate_directories:
            parent_path, name = _split_destination(path)
            self.add_directory(parent_path, name)
            return

        self._check_intermediate_walk(path)
        current = self._base(path)
        for segment in _segments(path):
            if segment == PARENT_DIR:
                current = current.parent
                continue
            existing = current.children.get(segment)
            if existing is not None:
                current = existing
                continue
            created = Node.directory(segment, current)
            current.children[segment] = created
            current = created
            self._log(LogLevel.INFO, f"mkdir {created.path}", created.path)

    def create_file(
        self,
        path: str,
        content: bytes | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> bool:
        """Create a file at *path*; return whether it worked.

        Never raises; this mirrors a best-effort file system primitive.
        *attributes* are accepted and ignored.
        """
        try:
            parent_path, name = _split_destination(path)
            self.add_file(parent_path, name, content)
        except MockFSError as exc:
            self._log(LogLevel.WARNING, f"create failed: {exc}", path)
            return False
        return True

    def contents_of_directory(self, path: str) -> list[str]:
        """List the names inside the directory at *path* (order unspecified).

        Raises:
            NodeNotFoundError: If *path* does not resolve.
            NotADirError: If *path* is a file.

        """
        node = self._resolve(path)
        if not node.is_directory:
            raise NotADirError(node.path)
        return list(node.children)

    def contents(self, path: str) -> bytes | None:
        """Return the content of the file at *path*.

        Returns None both when the path does not exist and when it is a
        directory; the two cases cannot be told apart here.  A file that
        was created without content also returns None.
        """
        try:
            node = self._resolve(path)
        except MockFSError:
            return None
        if node.is_directory:
            return None
        return node.content

    # -- Internals -------------------------------------------------------------

    def _base(self, path: str) -> Node:
        return self._root if _is_absolute(path) else self._cwd

    def _resolve(self, path: str) -> Node:
        """Walk *path* from the root or the current directory.

        Raises:
            NodeNotFoundError: With the absolute path of the first
                segment that could not be found.

        """
        current = self._base(path)
        for segment in _segments(path):
            if segment == PARENT_DIR:
                current = current.parent
                continue
            child = current.children.get(segment)
            if child is None:
                raise NodeNotFoundError(current.child_path(segment))
            current = child
        return current

    def _check_intermediate_walk(self, path: str) -> None:
        """Raise whatever creating *path* with intermediates would raise.

        Nothing is created.  ``pending`` counts the directories below
        ``current`` that the real walk would create; those are always
        empty directories, so only existing nodes can fail the walk.

        Raises:
            NotADirError: If a segment before the last is a file.
            NodeExistsError: If the walk ends on a file.

        """
        current = self._base(path)
        pending = 0
        for segment in _segments(path):
            if segment == PARENT_DIR:
                if pending:
                    pending -= 1
                else:
                    current = current.parent
                continue
            if pending:
                pending += 1
                continue
            if not current.is_directory:
                raise NotADirError(current.path)
            child = current.children.get(segment)
            if child is None:
                pending = 1
            else:
                current = child
        if not pending and not current.is_directory:
            raise NodeExistsError(current.path)

    def _insert(self, node: Node, parent: Node) -> None:
        """Link *node* into *parent* under its own name.

        Raises:
            NotADirError: If *parent* is a file.
            NodeExistsError: If the name is already taken.

        """
        if not parent.is_directory:
            raise NotADirError(parent.path)
        if node.name in parent.children:
            raise NodeExistsError(parent.child_path(node.name))
        node.parent = parent
        parent.children[node.name] = node

    def _log(self, level: LogLevel, message: str, path: str) -> None:
        if self._logger is not None:
            self._logger.log(level, message, source=_SOURCE, path=path)
