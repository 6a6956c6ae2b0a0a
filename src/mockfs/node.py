"""Node tree: the in-memory structure behind the mock file manager.

A tree is made of **nodes**.  Each node is one of two kinds:

- **File**: holds raw ``bytes`` content (or ``None`` if nothing has been
  written yet) and never has children.
- **Directory**: holds a ``dict[str, Node]`` of children keyed by name
  and never has content.

Every node keeps a reference to the directory that contains it, which is
what lets a node render its own absolute path.  The root is the one
node whose parent is itself; upward walks stop there::

    root ("")  ── parent ──▶ root
     └── home  ── parent ──▶ root
          └── README.md ── parent ──▶ home

Unlike an inode table, names live *in* the node here.  A node is always
reachable under exactly one name, so moving or copying a subtree means
building a new subtree (see ``Node.copy``), never sharing one.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

SEPARATOR = "/"


class NodeType(StrEnum):
    """The kind of object a node represents."""

    FILE = "file"
    DIRECTORY = "directory"


class Node:
    """A file or directory in the in-memory tree.

    Use the ``file``, ``directory`` and ``root`` constructors rather than
    calling the class directly; they keep the kind-specific fields
    consistent.
    """

    def __init__(
        self,
        name: str,
        node_type: NodeType,
        parent: Node | None,
        *,
        content: bytes | None = None,
        children: dict[str, Node] | None = None,
    ) -> None:
        """Create a node.  A ``None`` parent makes the node its own parent (a root)."""
        self.name = name
        self._node_type = node_type
        self.parent: Node = self if parent is None else parent
        self.content = content
        self.children: dict[str, Node] = {} if children is None else children

    # -- Constructors ------------------------------------------------------

    @classmethod
    def file(cls, name: str, parent: Node, content: bytes | None = None) -> Node:
        """Create a file node under *parent* (not yet inserted into it)."""
        return cls(name, NodeType.FILE, parent, content=content)

    @classmethod
    def directory(cls, name: str, parent: Node, children: dict[str, Node] | None = None) -> Node:
        """Create a directory node under *parent* (not yet inserted into it)."""
        return cls(name, NodeType.DIRECTORY, parent, children=children)

    @classmethod
    def root(cls) -> Node:
        """Create an empty root directory, a directory whose parent is itself."""
        return cls("", NodeType.DIRECTORY, None)

    # -- Queries -----------------------------------------------------------

    @property
    def node_type(self) -> NodeType:
        """Return the kind of this node (fixed at construction)."""
        return self._node_type

    @property
    def is_directory(self) -> bool:
        """Return True for directory nodes."""
        return self._node_type is NodeType.DIRECTORY

    @property
    def is_root(self) -> bool:
        """Return True if this node is the top of its tree."""
        return self.parent is self

    @property
    def path(self) -> str:
        """Return the absolute path of this node, e.g. ``/home/dev``.

        Walks parent links until the root's self-loop.  The root itself
        renders as ``/``.
        """
        names: list[str] = []
        node = self
        while not node.is_root:
            names.append(node.name)
            node = node.parent
        return SEPARATOR + SEPARATOR.join(reversed(names))

    def child_path(self, name: str) -> str:
        """Return the absolute path a child called *name* would have."""
        base = self.path
        return f"{base}{name}" if base == SEPARATOR else f"{base}{SEPARATOR}{name}"

    # -- Structural operations -----------------------------------------------

    def copy(self, name: str | None = None, parent: Node | None = None) -> Node:
        """Return a deep, structurally independent clone of this node.

        Every descendant is cloned as well and re-parented into the new
        subtree, so no node in the result is shared with the source.
        File content is ``bytes`` (immutable), so sharing the value
        itself cannot leak mutations between the two trees.

        Args:
            name: Name for the clone; defaults to this node's name.
            parent: Parent for the clone; defaults to this node's parent.

        """
        new_name = self.name if name is None else name
        new_parent = self.parent if parent is None else parent

        if not self.is_directory:
            return Node.file(new_name, new_parent, self.content)

        clone = Node.directory(new_name, new_parent)
        for child_name, child in self.children.items():
            clone.children[child_name] = child.copy(parent=clone)
        return clone

    def populate(self, structure: Mapping[str, Any]) -> None:
        """Fill this directory from a nested mapping of literals.

        A ``str`` value becomes a file whose content is the UTF-8
        encoding of the string; a nested mapping becomes a subdirectory
        populated recursively.  Only meant for trusted, hand-written
        literals: anything else is a programming error.

        Raises:
            TypeError: If this node is a file, or a value is neither a
                string nor a mapping.

        """
        if not self.is_directory:
            msg = f"Cannot populate a file node: {self.path}"
            raise TypeError(msg)

        for name, value in structure.items():
            if isinstance(value, str):
                self.children[name] = Node.file(name, self, value.encode("utf-8"))
            elif isinstance(value, Mapping):
                subdir = Node.directory(name, self)
                subdir.populate(value)
                self.children[name] = subdir
            else:
                msg = f"Unsupported value for {name!r}: {type(value).__name__}"
                raise TypeError(msg)

    def to_dict(self) -> dict[str, Any]:
        """Snapshot a directory as a nested mapping.

        Files map to their raw content (``bytes`` or ``None``) and
        directories to nested dicts.  Handy for comparing whole trees.
        """
        if not self.is_directory:
            msg = f"Cannot snapshot a file node: {self.path}"
            raise TypeError(msg)
        return {
            name: child.to_dict() if child.is_directory else child.content
            for name, child in self.children.items()
        }

    def __repr__(self) -> str:
        """Show the kind and absolute path, never the parent chain."""
        return f"Node({self._node_type.value}, {self.path!r})"
