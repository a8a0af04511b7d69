"""Shell-facing bindings over the resolver and tree operator.

These wrappers accept arbitrary objects, as a command shell would pass them,
check that each one is a handle of the expected kind, and delegate. Child
resolution here ignores case unless told otherwise.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, TypeVar

from pathinfo.exceptions import HandleTypeError
from pathinfo.operations import TreeOperator
from pathinfo.resolver import PathResolver
from pathinfo.types import CopyPolicy, DirectoryHandle, FileHandle, PathHandle

_H = TypeVar("_H", bound=PathHandle)


def handle_for(path: str | os.PathLike[str], default: type[PathHandle] = DirectoryHandle) -> PathHandle:
    """Build the handle matching what currently exists at a path.

    Args:
        path: Location to reference.
        default: Handle type used when nothing exists at the path.

    Returns:
        DirectoryHandle for a directory, FileHandle for a file, otherwise an
        instance of default.
    """
    location = Path(path)
    if location.is_dir():
        return DirectoryHandle(location)
    if location.is_file():
        return FileHandle(location)
    return default(location)


def _require(value: Any, expected: type[_H], role: str) -> _H:
    if isinstance(value, expected):
        return value
    raise HandleTypeError(
        f"The {role} must be a {expected.__name__}, got {type(value).__name__}: {value}."
    )


def shell_get_directory(
    directory: Any,
    name: str | None,
    resolve: bool = False,
    ignore_case: bool = True,
    resolver: PathResolver | None = None,
) -> DirectoryHandle:
    """Shell wrapper for PathResolver.get_directory."""
    parent = _require(directory, DirectoryHandle, "directory")
    return (resolver or PathResolver.create()).get_directory(parent, name, resolve, ignore_case)


def shell_get_file(
    directory: Any,
    name: str | None,
    resolve: bool = False,
    ignore_case: bool = True,
    resolver: PathResolver | None = None,
) -> FileHandle:
    """Shell wrapper for PathResolver.get_file."""
    parent = _require(directory, DirectoryHandle, "directory")
    return (resolver or PathResolver.create()).get_file(parent, name, resolve, ignore_case)


def shell_delete_content(directory: Any, operator: TreeOperator | None = None) -> None:
    """Shell wrapper for TreeOperator.delete_content."""
    target = _require(directory, DirectoryHandle, "directory")
    (operator or TreeOperator.create()).delete_content(target)


def shell_copy_content_to(
    source: Any,
    destination: Any,
    copy_empty_directories: bool = False,
    overwrite: bool = False,
    clean_target: bool = False,
    operator: TreeOperator | None = None,
) -> None:
    """Shell wrapper for TreeOperator.copy_content_to."""
    source_dir = _require(source, DirectoryHandle, "source")
    destination_dir = _require(destination, DirectoryHandle, "destination")
    policy = CopyPolicy(
        copy_empty_directories=copy_empty_directories,
        overwrite=overwrite,
        clean_target=clean_target,
    )
    (operator or TreeOperator.create()).copy_content_to(source_dir, destination_dir, policy)


def shell_move_file_into(
    destination: Any,
    source: Any,
    overwrite: bool = False,
    operator: TreeOperator | None = None,
) -> None:
    """Shell wrapper for TreeOperator.move_file_into."""
    destination_file = _require(destination, FileHandle, "destination")
    source_file = _require(source, FileHandle, "source")
    (operator or TreeOperator.create()).move_file_into(destination_file, source_file, overwrite)


def shell_copy_file_into(
    destination: Any,
    source: Any,
    overwrite: bool = False,
    operator: TreeOperator | None = None,
) -> None:
    """Shell wrapper for TreeOperator.copy_file_into."""
    destination_file = _require(destination, FileHandle, "destination")
    source_file = _require(source, FileHandle, "source")
    (operator or TreeOperator.create()).copy_file_into(destination_file, source_file, overwrite)


def shell_try_delete(file: Any, operator: TreeOperator | None = None) -> None:
    """Shell wrapper for TreeOperator.try_delete."""
    target = _require(file, FileHandle, "file")
    (operator or TreeOperator.create()).try_delete(target)
