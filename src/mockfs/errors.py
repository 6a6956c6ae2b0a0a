"""Error taxonomy for the in-memory file manager.

Every failure the manager reports is a ``MockFSError``.  Each kind also
inherits from the builtin exception a real file system would raise for
the same condition, so code written against ``os`` / ``shutil`` keeps
working when the emulation is swapped in:

- ``NodeNotFoundError``  → ``FileNotFoundError``
- ``NodeExistsError``    → ``FileExistsError``
- ``NotADirError``       → ``NotADirectoryError``
- ``InvalidNameError`` / ``InvalidPathError`` → ``ValueError``
"""


class MockFSError(Exception):
    """Raise when an in-memory file system operation fails."""


class NodeNotFoundError(MockFSError, FileNotFoundError):
    """Raise when path resolution walks off the tree.

    Attributes:
        path: The absolute path that was looked for.

    """

    def __init__(self, path: str) -> None:
        """Record the absolute path that could not be resolved."""
        self.path = path
        msg = f"Node not found: {path}"
        super().__init__(msg)


class NodeExistsError(MockFSError, FileExistsError):
    """Raise when a directory already holds a child with the same name."""

    def __init__(self, path: str) -> None:
        """Record the path of the colliding entry."""
        self.path = path
        msg = f"Already exists: {path}"
        super().__init__(msg)


class InvalidNameError(MockFSError, ValueError):
    """Raise when a node name contains a path separator."""

    def __init__(self, name: str) -> None:
        """Record the rejected name."""
        self.name = name
        msg = f"Invalid name: {name!r}"
        super().__init__(msg)


class InvalidPathError(MockFSError, ValueError):
    """Raise when a path cannot be split into a parent and a name."""

    def __init__(self, path: str, reason: str = "cannot split into parent and name") -> None:
        """Record the rejected path and why it was rejected."""
        self.path = path
        msg = f"Invalid path {path!r}: {reason}"
        super().__init__(msg)


class NotADirError(MockFSError, NotADirectoryError):
    """Raise when an operation needs a directory but got a file."""

    def __init__(self, path: str) -> None:
        """Record the path of the offending file."""
        self.path = path
        msg = f"Not a directory: {path}"
        super().__init__(msg)
