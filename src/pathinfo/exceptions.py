"""Exception types raised by pathinfo.

Each error also derives from the closest built-in exception so callers can
catch either the pathinfo type or the standard one.
"""

from __future__ import annotations

__all__ = [
    "AlreadyExistsError",
    "AmbiguousMatchError",
    "ChildFileNotFoundError",
    "DirectoryNotFoundError",
    "HandleTypeError",
    "InvalidArgumentError",
    "NotFoundError",
    "PathInfoError",
    "SettingsError",
]


class PathInfoError(Exception):
    """Base class for pathinfo errors."""

    pass


class InvalidArgumentError(PathInfoError, ValueError):
    """A child name was malformed."""

    pass


class NotFoundError(PathInfoError, FileNotFoundError):
    """A path could not be resolved to an entry of the expected kind."""

    pass


class DirectoryNotFoundError(NotFoundError):
    """A child directory could not be resolved."""

    pass


class ChildFileNotFoundError(NotFoundError):
    """A child or source file could not be resolved."""

    pass


class AlreadyExistsError(PathInfoError, FileExistsError):
    """A destination file exists and overwrite was not requested."""

    pass


class AmbiguousMatchError(PathInfoError):
    """More than one entry matched a child name case-insensitively."""

    pass


class HandleTypeError(PathInfoError, TypeError):
    """A shell binding received something other than the expected handle."""

    pass


class SettingsError(PathInfoError, ValueError):
    """The settings file could not be parsed."""

    pass
