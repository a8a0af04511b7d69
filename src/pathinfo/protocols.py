"""Protocol definitions for core abstractions.

The resolver and the tree operator reach the disk only through the
FileSystem protocol, so tests can substitute a double without touching
real files. All concrete implementations satisfy it structurally.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations.

    Abstracts filesystem access to enable testing without real I/O.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory.

        Args:
            path: Path to check.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file.

        Args:
            path: Path to check.

        Returns:
            True if path is a file, False otherwise.
        """
        ...

    def is_symlink(self, path: Path) -> bool:
        """Check if a path is a symbolic link.

        Args:
            path: Path to check.

        Returns:
            True if path is a link, False otherwise.
        """
        ...

    def iterdir(self, path: Path) -> list[Path]:
        """List the immediate children of a directory.

        Args:
            path: Directory to list.

        Returns:
            Child paths in name order.
        """
        ...

    def walk(self, path: Path) -> Iterator[tuple[str, list[str], list[str]]]:
        """Walk a directory tree top-down.

        Callers may prune the yielded directory-name lists in place to skip
        subtrees.

        Args:
            path: Root of the walk.

        Yields:
            Tuples of (directory, child directory names, child file names).
        """
        ...

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory.

        Args:
            path: Path to create.
            parents: Create parent directories if needed.
            exist_ok: Don't raise if directory exists.
        """
        ...

    def unlink(self, path: Path) -> None:
        """Remove a file.

        Args:
            path: Path to remove.
        """
        ...

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree.

        Args:
            path: Path to remove.
        """
        ...

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy file content and metadata, replacing any existing file.

        Args:
            src: Source file.
            dst: Destination file path.

        Raises:
            IsADirectoryError: If dst is a directory.
        """
        ...

    def move(self, src: Path, dst: Path) -> None:
        """Move a file to a new path.

        Args:
            src: Source file.
            dst: Destination file path.

        Raises:
            IsADirectoryError: If dst is a directory.
        """
        ...
