"""Resolution of child files and directories beneath a directory handle."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path, PureWindowsPath

from pathinfo.exceptions import (
    AmbiguousMatchError,
    ChildFileNotFoundError,
    DirectoryNotFoundError,
    InvalidArgumentError,
    NotFoundError,
)
from pathinfo.filesystem import RealFileSystem
from pathinfo.protocols import FileSystem
from pathinfo.types import DirectoryHandle, FileHandle, PathHandle, ResolutionRequest

logger = logging.getLogger(__name__)

# Both separators are accepted in child names regardless of the host.
_SEPARATORS = re.compile(r"[\\/]")


@dataclass(frozen=True)
class _ChildKind:
    """What a resolver call expects to find."""

    noun: str
    label: str
    handle_type: type[PathHandle]
    error_type: type[NotFoundError]


_DIRECTORY = _ChildKind("directory", "Directory", DirectoryHandle, DirectoryNotFoundError)
_FILE = _ChildKind("file", "File", FileHandle, ChildFileNotFoundError)


def _has_root(name: str) -> bool:
    # Drive letters and UNC shares are only roots on Windows; "a:b.txt" is a
    # plain file name elsewhere.
    if os.name == "nt":
        return bool(PureWindowsPath(name).anchor)
    return name.startswith(("/", "\\"))


def normalize_child_name(name: str | None, noun: str = "item") -> tuple[str, ...]:
    """Validate a child name and split it into path segments.

    Leading ``.`` segments, empty segments and surrounding separators are
    dropped, so ``./A/``, ``.\\A\\`` and ``A`` all normalize to ``("A",)``.

    Args:
        name: Child name as given by the caller.
        noun: Kind of child, used in error messages.

    Returns:
        Tuple of path segments.

    Raises:
        InvalidArgumentError: If the name is empty, whitespace, or rooted.
    """
    if name is None or not name.strip():
        raise InvalidArgumentError(f"The name of the child {noun} cannot be null or empty.")

    if _has_root(name):
        raise InvalidArgumentError(f"The name of the child {noun} cannot contain a root.")

    parts = tuple(part for part in _SEPARATORS.split(name) if part not in ("", "."))
    if not parts:
        raise InvalidArgumentError(f"The name of the child {noun} cannot be null or empty.")
    return parts


def _folded(parts: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(part.casefold() for part in parts)


class PathResolver:
    """Resolves child names under a directory into file or directory handles.

    Existing children are found at any depth and returned with their on-disk
    casing. Children that do not exist yet resolve to the combined path so
    they can be created later.
    """

    def __init__(self, filesystem: FileSystem) -> None:
        """Initialize resolver with its filesystem.

        Args:
            filesystem: Filesystem abstraction (required).

        Note:
            Use factory method `create()` for production code.
        """
        self.fs = filesystem

    @classmethod
    def create(cls, filesystem: FileSystem | None = None) -> PathResolver:
        """Create a resolver, defaulting to the real filesystem.

        Args:
            filesystem: Optional filesystem abstraction.

        Returns:
            Configured PathResolver instance.
        """
        return cls(filesystem or RealFileSystem())

    def get_directory(
        self,
        parent: DirectoryHandle,
        name: str | None,
        resolve: bool = False,
        ignore_case: bool = False,
    ) -> DirectoryHandle:
        """Return a handle for the child directory with the given name.

        Args:
            parent: Directory to resolve beneath.
            name: Child name; nested names such as ``A/B`` are supported.
            resolve: Raise if the child does not exist.
            ignore_case: Accept an existing child whose casing differs.

        Returns:
            DirectoryHandle at the existing child or at ``parent/name``.

        Raises:
            InvalidArgumentError: If the name is empty or rooted.
            DirectoryNotFoundError: If the child exists with another case, is
                a file, or is missing while resolve is set.
            AmbiguousMatchError: If several case variants match.
        """
        request = ResolutionRequest(name=name, resolve=resolve, ignore_case=ignore_case)
        return self._resolve(parent, request, _DIRECTORY)

    def get_file(
        self,
        parent: DirectoryHandle,
        name: str | None,
        resolve: bool = False,
        ignore_case: bool = False,
    ) -> FileHandle:
        """Return a handle for the child file with the given name.

        Args:
            parent: Directory to resolve beneath.
            name: Child name; nested names such as ``A/b.txt`` are supported.
            resolve: Raise if the child does not exist.
            ignore_case: Accept an existing child whose casing differs.

        Returns:
            FileHandle at the existing child or at ``parent/name``.

        Raises:
            InvalidArgumentError: If the name is empty or rooted.
            ChildFileNotFoundError: If the child exists with another case, is
                a directory, or is missing while resolve is set.
            AmbiguousMatchError: If several case variants match.
        """
        request = ResolutionRequest(name=name, resolve=resolve, ignore_case=ignore_case)
        return self._resolve(parent, request, _FILE)

    def resolve_child(
        self,
        parent: DirectoryHandle,
        request: ResolutionRequest,
        expected: type[PathHandle],
    ) -> PathHandle:
        """Resolve a request for either handle type.

        Args:
            parent: Directory to resolve beneath.
            request: Name and flags.
            expected: DirectoryHandle or FileHandle.

        Returns:
            Handle of the expected type.
        """
        kind = _DIRECTORY if issubclass(expected, DirectoryHandle) else _FILE
        return self._resolve(parent, request, kind)

    def _resolve(self, parent: DirectoryHandle, request: ResolutionRequest, kind: _ChildKind):
        parts = normalize_child_name(request.name, kind.noun)
        name = os.sep.join(parts)

        match = self._find_match(parent.path, parts, name)
        relative = os.sep.join(match.relative_to(parent.path).parts) if match else None

        if not request.ignore_case and match is not None and relative != name:
            raise kind.error_type(
                f"A child named '{name}' already exists but with a different case: {relative}."
            )

        if match is not None and self.fs.is_dir(match) != (kind is _DIRECTORY):
            raise kind.error_type(f"A child named '{name}' already exists but is not a {kind.label}.")

        if request.resolve and match is None:
            raise kind.error_type(
                f"Cannot find child '{name}' because it does not exist and resolve was set to true."
            )

        resolved = match if match is not None else parent.path.joinpath(*parts)
        logger.debug("Resolved %s '%s' under %s to %s", kind.noun, name, parent.path, resolved)
        return kind.handle_type(resolved)

    def _find_match(self, parent: Path, parts: tuple[str, ...], name: str) -> Path | None:
        """Find the existing entry whose relative path equals parts, ignoring case."""
        if not self.fs.is_dir(parent):
            return None

        wanted = _folded(parts)
        matches: list[Path] = []
        for root, dirnames, filenames in self.fs.walk(parent):
            depth = len(Path(root).relative_to(parent).parts)
            if depth == len(parts) - 1:
                for entry in (*dirnames, *filenames):
                    if entry.casefold() == wanted[-1]:
                        matches.append(Path(root) / entry)
                dirnames[:] = []
            else:
                # Only descend into directories that can lead to the leaf.
                dirnames[:] = [d for d in dirnames if d.casefold() == wanted[depth]]

        if len(matches) > 1:
            exact = [m for m in matches if m.relative_to(parent).parts == parts]
            if len(exact) != 1:
                found = ", ".join(os.sep.join(m.relative_to(parent).parts) for m in matches)
                raise AmbiguousMatchError(f"The name '{name}' matched multiple children: {found}.")
            matches = exact

        return matches[0] if matches else None


def get_directory(
    parent: DirectoryHandle,
    name: str | None,
    resolve: bool = False,
    ignore_case: bool = False,
) -> DirectoryHandle:
    """Resolve a child directory on the real filesystem.

    See PathResolver.get_directory.
    """
    return PathResolver.create().get_directory(parent, name, resolve, ignore_case)


def get_file(
    parent: DirectoryHandle,
    name: str | None,
    resolve: bool = False,
    ignore_case: bool = False,
) -> FileHandle:
    """Resolve a child file on the real filesystem.

    See PathResolver.get_file.
    """
    return PathResolver.create().get_file(parent, name, resolve, ignore_case)
