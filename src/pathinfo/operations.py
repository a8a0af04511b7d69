"""Directory content and single-file operations on path handles."""

from __future__ import annotations

import logging
from pathlib import Path

from pathinfo.exceptions import AlreadyExistsError, ChildFileNotFoundError
from pathinfo.filesystem import RealFileSystem
from pathinfo.protocols import FileSystem
from pathinfo.types import CopyPolicy, DirectoryHandle, FileHandle

logger = logging.getLogger(__name__)


class TreeOperator:
    """Deletes and copies directory content, and moves/copies/deletes files.

    Handles passed in are never rebound: after a move the source handle still
    references its original, now vacated, path. Handles re-query the disk on
    access, so no refresh step is needed after an operation.
    """

    def __init__(self, filesystem: FileSystem) -> None:
        """Initialize operator with its filesystem.

        Args:
            filesystem: Filesystem abstraction (required).

        Note:
            Use factory method `create()` for production code.
        """
        self.fs = filesystem

    @classmethod
    def create(cls, filesystem: FileSystem | None = None) -> TreeOperator:
        """Create an operator, defaulting to the real filesystem.

        Args:
            filesystem: Optional filesystem abstraction.

        Returns:
            Configured TreeOperator instance.
        """
        return cls(filesystem or RealFileSystem())

    def delete_content(self, directory: DirectoryHandle) -> None:
        """Delete every file and subdirectory inside a directory.

        The directory itself is kept. Nothing happens if it does not exist.

        Args:
            directory: Directory to empty.
        """
        if not self.fs.is_dir(directory.path):
            return

        children = self.fs.iterdir(directory.path)
        for child in children:
            if self.fs.is_dir(child) and not self.fs.is_symlink(child):
                self.fs.rmtree(child)
        for child in children:
            if self.fs.exists(child) or self.fs.is_symlink(child):
                self.fs.unlink(child)
        logger.debug("Deleted %d children of %s", len(children), directory.path)

    def copy_content_to(
        self,
        source: DirectoryHandle,
        destination: DirectoryHandle,
        policy: CopyPolicy | None = None,
    ) -> None:
        """Copy the content of one directory into another.

        Args:
            source: Directory whose content is copied. Nothing happens if it
                does not exist.
            destination: Directory receiving the content; created as needed.
            policy: Copy options. Defaults to CopyPolicy().

        Raises:
            AlreadyExistsError: If a destination file exists and
                policy.overwrite is not set.
        """
        policy = policy or CopyPolicy()
        if not self.fs.is_dir(source.path):
            return

        if policy.clean_target and self.fs.is_dir(destination.path):
            logger.debug("Cleaning %s before copy", destination.path)
            self.delete_content(destination)

        # Listed up front so a destination nested in the source is not re-copied.
        files: list[Path] = []
        directories: list[Path] = []
        for root, dirnames, filenames in self.fs.walk(source.path):
            relative_root = Path(root).relative_to(source.path)
            files.extend(relative_root / filename for filename in filenames)
            directories.extend(relative_root / dirname for dirname in dirnames)

        for relative in files:
            target = destination.path / relative
            self.fs.mkdir(target.parent, parents=True, exist_ok=True)
            self._copy(source.path / relative, target, policy.overwrite)

        if policy.copy_empty_directories:
            for relative in directories:
                self.fs.mkdir(destination.path / relative, parents=True, exist_ok=True)

    def move_file_into(
        self, destination: FileHandle, source: FileHandle, overwrite: bool = False
    ) -> None:
        """Move the source file to the destination path.

        Args:
            destination: Where the file ends up. Parent directories are
                created as needed.
            source: File to move. The handle keeps its original path.
            overwrite: Replace an existing destination file.

        Raises:
            ChildFileNotFoundError: If the source file does not exist.
            AlreadyExistsError: If the destination exists and overwrite is
                not set.
        """
        if not self.fs.is_file(source.path):
            raise ChildFileNotFoundError(f"The source file '{source.full_name}' does not exist.")

        if self.fs.is_file(destination.path):
            if not overwrite:
                raise AlreadyExistsError(
                    f"The destination file '{destination.full_name}' already exists "
                    "and overwrite is not set to true."
                )
            self.fs.unlink(destination.path)

        self.fs.mkdir(destination.path.parent, parents=True, exist_ok=True)
        self.fs.move(source.path, destination.path)
        logger.debug("Moved %s to %s", source.path, destination.path)

    def copy_file_into(
        self, destination: FileHandle, source: FileHandle, overwrite: bool = False
    ) -> None:
        """Copy the source file to the destination path.

        Args:
            destination: Where the copy is written. Parent directories are
                created as needed.
            source: File to copy.
            overwrite: Replace an existing destination file.

        Raises:
            ChildFileNotFoundError: If the source file does not exist.
            AlreadyExistsError: If the destination exists and overwrite is
                not set.
        """
        if not self.fs.is_file(source.path):
            raise ChildFileNotFoundError(f"The source file {source.full_name} does not exist.")

        self.fs.mkdir(destination.path.parent, parents=True, exist_ok=True)
        self._copy(source.path, destination.path, overwrite)

    def try_delete(self, file: FileHandle) -> None:
        """Delete a file if it exists; never fails for a missing file.

        Args:
            file: File to delete.
        """
        if self.fs.is_file(file.path):
            self.fs.unlink(file.path)
            logger.debug("Deleted %s", file.path)

    def _copy(self, src: Path, dst: Path, overwrite: bool) -> None:
        if not overwrite and self.fs.exists(dst):
            raise AlreadyExistsError(f"The file '{dst}' already exists.")
        self.fs.copy_file(src, dst)
        logger.debug("Copied %s to %s", src, dst)


def delete_content(directory: DirectoryHandle) -> None:
    """Delete the content of a directory on the real filesystem."""
    TreeOperator.create().delete_content(directory)


def copy_content_to(
    source: DirectoryHandle,
    destination: DirectoryHandle,
    copy_empty_directories: bool = False,
    overwrite: bool = False,
    clean_target: bool = False,
) -> None:
    """Copy directory content on the real filesystem.

    See TreeOperator.copy_content_to.
    """
    policy = CopyPolicy(
        copy_empty_directories=copy_empty_directories,
        overwrite=overwrite,
        clean_target=clean_target,
    )
    TreeOperator.create().copy_content_to(source, destination, policy)


def move_file_into(destination: FileHandle, source: FileHandle, overwrite: bool = False) -> None:
    """Move a file on the real filesystem."""
    TreeOperator.create().move_file_into(destination, source, overwrite)


def copy_file_into(destination: FileHandle, source: FileHandle, overwrite: bool = False) -> None:
    """Copy a file on the real filesystem."""
    TreeOperator.create().copy_file_into(destination, source, overwrite)


def try_delete(file: FileHandle) -> None:
    """Delete a file on the real filesystem if it exists."""
    TreeOperator.create().try_delete(file)
