"""Filesystem abstraction for testability.

The RealFileSystem implementation wraps standard library operations and
satisfies the FileSystem protocol structurally.
"""

from __future__ import annotations

import errno
import os
import shutil
from collections.abc import Iterator
from pathlib import Path


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library os, Path and shutil operations.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        return path.is_file()

    def is_symlink(self, path: Path) -> bool:
        """Check if a path is a symbolic link."""
        return path.is_symlink()

    def iterdir(self, path: Path) -> list[Path]:
        """List the immediate children of a directory."""
        return sorted(path.iterdir())

    def walk(self, path: Path) -> Iterator[tuple[str, list[str], list[str]]]:
        """Walk a directory tree top-down."""
        for root, dirnames, filenames in os.walk(path):
            dirnames.sort()
            filenames.sort()
            yield root, dirnames, filenames

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        path.mkdir(parents=parents, exist_ok=exist_ok)

    def unlink(self, path: Path) -> None:
        """Remove a file."""
        path.unlink()

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        shutil.rmtree(path)

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy file content and metadata."""
        shutil.copyfile(src, dst)
        shutil.copystat(src, dst)

    def move(self, src: Path, dst: Path) -> None:
        """Move a file to a new path."""
        # shutil.move would place the file inside an existing directory.
        if dst.is_dir():
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), str(dst))
        shutil.move(src, dst)
