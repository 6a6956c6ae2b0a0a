"""Path-string helpers.

Pure string functions; none of them touch a file system::

    basename("/tmp/scratch.tiff")   → "scratch.tiff"
    dirname("/tmp/scratch.tiff")    → "tmp"
    filename("/tmp/scratch.tiff")   → "scratch"
    extension("/tmp/scratch.tiff")  → "tiff"

Note that ``dirname`` returns the *name* of the containing directory,
not its full path.
"""

import os.path
from pathlib import PurePosixPath


def expand(path: str) -> str:
    """Expand a leading ``~`` to the user's home directory."""
    return os.path.expanduser(path) if path.startswith("~") else path


def basename(path: str) -> str:
    """Return the last component of *path*."""
    return PurePosixPath(path).name


def dirname(path: str) -> str:
    """Return the name of the directory containing *path*.

    A single-component path returns that component (so ``"/"`` gives
    ``"/"``), and the empty string gives the empty string.
    """
    if path == "":
        return ""
    parts = PurePosixPath(path).parts
    return parts[0] if len(parts) == 1 else parts[-2]


def filename(path: str) -> str:
    """Return the base name of *path* without its extension."""
    return PurePosixPath(path).stem


def extension(path: str) -> str:
    """Return the extension of *path* without the dot (``""`` if none)."""
    return PurePosixPath(path).suffix.removeprefix(".")
