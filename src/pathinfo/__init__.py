"""Child resolution and tree copy/clean helpers for filesystem paths."""

__version__ = "0.1.0"

from pathinfo.exceptions import (
    AlreadyExistsError,
    AmbiguousMatchError,
    ChildFileNotFoundError,
    DirectoryNotFoundError,
    HandleTypeError,
    InvalidArgumentError,
    NotFoundError,
    PathInfoError,
    SettingsError,
)
from pathinfo.operations import (
    TreeOperator,
    copy_content_to,
    copy_file_into,
    delete_content,
    move_file_into,
    try_delete,
)
from pathinfo.protocols import FileSystem
from pathinfo.resolver import PathResolver, get_directory, get_file
from pathinfo.types import CopyPolicy, DirectoryHandle, FileHandle, PathHandle, ResolutionRequest

__all__ = [
    "__version__",
    "AlreadyExistsError",
    "AmbiguousMatchError",
    "ChildFileNotFoundError",
    "CopyPolicy",
    "DirectoryHandle",
    "DirectoryNotFoundError",
    "FileHandle",
    "FileSystem",
    "HandleTypeError",
    "InvalidArgumentError",
    "NotFoundError",
    "PathHandle",
    "PathInfoError",
    "PathResolver",
    "SettingsError",
    "ResolutionRequest",
    "TreeOperator",
    "copy_content_to",
    "copy_file_into",
    "delete_content",
    "get_directory",
    "get_file",
    "move_file_into",
    "try_delete",
]
