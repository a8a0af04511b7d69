"""Shared data types for pathinfo."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict

__all__ = [
    "CopyPolicy",
    "DirectoryHandle",
    "FileHandle",
    "PathHandle",
    "ResolutionRequest",
]


@dataclass(frozen=True)
class PathHandle(ABC):
    """Reference to a filesystem location that may or may not exist.

    Handles hold only a path. Every attribute that depends on the disk
    (``exists``, ``is_dir``, ``is_file``) is queried when it is read, so a
    handle never reports stale state after the filesystem changes.

    Attributes:
        path: Absolute, normalized path of the location.
    """

    path: Path

    def __init__(self, path: str | os.PathLike[str]) -> None:
        """Initialize a handle.

        Args:
            path: Location to reference. Relative paths are made absolute
                against the current working directory.
        """
        object.__setattr__(self, "path", Path(os.path.abspath(path)))

    def __str__(self) -> str:
        return self.full_name

    def __fspath__(self) -> str:
        return self.full_name

    @property
    def full_name(self) -> str:
        """Absolute path as a string."""
        return str(self.path)

    @property
    def name(self) -> str:
        """Leaf name of the path."""
        return self.path.name

    @property
    def parent(self) -> DirectoryHandle:
        """Handle of the containing directory."""
        return DirectoryHandle(self.path.parent)

    @property
    @abstractmethod
    def exists(self) -> bool:
        """True if an entry of this handle's kind exists at the path."""

    def is_dir(self) -> bool:
        """Check if the path is currently a directory."""
        return self.path.is_dir()

    def is_file(self) -> bool:
        """Check if the path is currently a file."""
        return self.path.is_file()

    def refresh(self) -> PathHandle:
        """Return a handle for the same path.

        Handles never cache disk state; this exists so callers can mark the
        point after a mutation where they start trusting new values.
        """
        return type(self)(self.path)


class DirectoryHandle(PathHandle):
    """Handle expected to reference a directory."""

    @property
    def exists(self) -> bool:
        return self.path.is_dir()


class FileHandle(PathHandle):
    """Handle expected to reference a regular file."""

    @property
    def exists(self) -> bool:
        return self.path.is_file()

    @property
    def directory(self) -> DirectoryHandle:
        """Handle of the directory that holds the file."""
        return self.parent


class ResolutionRequest(BaseModel):
    """Parameters for resolving a child beneath a directory.

    Attributes:
        name: Relative child name, possibly nested (``A/B/C``).
        resolve: Require the child to exist already.
        ignore_case: Accept an existing child whose casing differs.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None
    resolve: bool = False
    ignore_case: bool = False


class CopyPolicy(BaseModel):
    """Options for copying directory content.

    Attributes:
        copy_empty_directories: Recreate every source directory, including
            directories that hold no files.
        overwrite: Replace destination files that already exist.
        clean_target: Delete the destination content before copying.
    """

    model_config = ConfigDict(frozen=True)

    copy_empty_directories: bool = False
    overwrite: bool = False
    clean_target: bool = False
