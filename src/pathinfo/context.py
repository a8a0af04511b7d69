"""Application context for dependency injection.

Separates object creation from object use so CLI commands can be exercised
with test doubles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pathinfo.filesystem import RealFileSystem
from pathinfo.operations import TreeOperator
from pathinfo.protocols import FileSystem
from pathinfo.resolver import PathResolver
from pathinfo.settings import SettingsManager


@dataclass
class AppContext:
    """Container for the services used by CLI commands."""

    resolver: PathResolver
    operator: TreeOperator
    settings: SettingsManager
    filesystem: FileSystem = field(default_factory=RealFileSystem)


def create_context(settings_dir: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Args:
        settings_dir: Override settings directory (for testing).

    Returns:
        Configured AppContext sharing one filesystem.
    """
    filesystem = RealFileSystem()
    settings = (
        SettingsManager.create(settings_dir) if settings_dir else SettingsManager.create_default()
    )
    return AppContext(
        resolver=PathResolver.create(filesystem),
        operator=TreeOperator.create(filesystem),
        settings=settings,
        filesystem=filesystem,
    )
