"""Real-disk file manager.

``RealFileManager`` satisfies the ``FileManager`` protocol using the
standard library (``pathlib``, ``os`` and ``shutil``).  It is the
production counterpart of ``MockFileManager``: code under test receives
the mock, production code receives this.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Mapping
from pathlib import Path
from typing import Any


class RealFileManager:
    """Production file manager backed by the local file system.

    Relative paths are resolved against the process working directory.
    *attributes* arguments are accepted for interface compatibility and
    ignored.
    """

    def file_exists(self, path: str) -> bool:
        """Check if a path exists."""
        return Path(path).exists()

    def file_exists_is_dir(self, path: str) -> tuple[bool, bool]:
        """Return ``(exists, is_directory)`` for a path."""
        target = Path(path)
        return target.exists(), target.is_dir()

    def copy_item(self, src_path: str, dst_path: str) -> None:
        """Copy a file or directory tree to a new path."""
        src, dst = Path(src_path), Path(dst_path)
        if src.is_dir():
            shutil.copytree(src, dst)
            return
        if not src.exists():
            msg = f"Path not found: {src_path}"
            raise FileNotFoundError(msg)
        if dst.exists():
            msg = f"Already exists: {dst_path}"
            raise FileExistsError(msg)
        shutil.copyfile(src, dst)

    def move_item(self, src_path: str, dst_path: str) -> None:
        """Move a file or directory tree to a new path."""
        if Path(dst_path).exists():
            msg = f"Already exists: {dst_path}"
            raise FileExistsError(msg)
        if not Path(src_path).exists():
            msg = f"Path not found: {src_path}"
            raise FileNotFoundError(msg)
        shutil.move(src_path, dst_path)

    def remove_item(self, path: str) -> None:
        """Remove a file or a whole directory tree."""
        target = Path(path)
        if target.is_dir():
            shutil.rmtree(target)
        else:
            target.unlink()

    def create_directory(
        self,
        path: str,
        with_intermediate_directories: bool = False,  # noqa: FBT001, FBT002
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        """Create a directory, optionally with its missing parents."""
        Path(path).mkdir(
            parents=with_intermediate_directories,
            exist_ok=with_intermediate_directories,
        )

    def create_file(
        self,
        path: str,
        content: bytes | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> bool:
        """Write a file (replacing any existing one); return whether it worked."""
        try:
            Path(path).write_bytes(content or b"")
        except OSError:
            return False
        return True

    def contents_of_directory(self, path: str) -> list[str]:
        """List the names inside a directory."""
        return os.listdir(path)

    def contents(self, path: str) -> bytes | None:
        """Read a whole file, or return None if that is not possible."""
        try:
            return Path(path).read_bytes()
        except OSError:
            return None
