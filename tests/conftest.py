"""Shared test fixtures."""

from __future__ import annotations

import hashlib
from collections.abc import Callable, Iterable
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from pathinfo.types import DirectoryHandle

BASE_FILE_NAMES = ("ChildFile1.txt", "ChildFile2.txt")


def _write_files(directory: Path, names: Iterable[str]) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    for name in names:
        path = directory / name
        # Each file holds its own path so every file hashes differently.
        path.write_text(f"{path}\n")


def _file_hash(path: Path) -> str:
    if not path.is_file():
        return ""
    return hashlib.sha256(path.read_bytes()).hexdigest()


@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Override home directory for testing."""
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    return tmp_path


@pytest.fixture
def write_files() -> Callable[[Path, Iterable[str]], None]:
    """Write files whose content is their own path."""
    return _write_files


@pytest.fixture
def file_hash() -> Callable[[Path], str]:
    """SHA-256 of a file, or an empty string when it does not exist."""
    return _file_hash


# ============================================================================
# Directory Tree Fixtures
# ============================================================================


@pytest.fixture
def source_root(tmp_path: Path) -> DirectoryHandle:
    """Create the reference tree.

    Source/
        ChildDir1/            (empty)
        ChildDir2/
            ChildFile1.txt
            ChildFile2.txt
        ChildFile1.txt
        ChildFile2.txt
    """
    root = tmp_path / "Source"
    (root / "ChildDir1").mkdir(parents=True)
    _write_files(root, BASE_FILE_NAMES)
    _write_files(root / "ChildDir2", BASE_FILE_NAMES)
    return DirectoryHandle(root)


@pytest.fixture
def destination_root(tmp_path: Path) -> DirectoryHandle:
    """Handle for a destination directory that does not exist yet."""
    return DirectoryHandle(tmp_path / "Destination")


# ============================================================================
# Mock Fixtures
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.is_dir.return_value = False
    fs.is_file.return_value = False
    fs.is_symlink.return_value = False
    fs.iterdir.return_value = []
    fs.walk.return_value = iter([])
    return fs


@pytest.fixture
def mock_app_context() -> MagicMock:
    """Create a complete mock AppContext for CLI testing."""
    from pathinfo.context import AppContext
    from pathinfo.settings import Settings

    ctx = MagicMock(spec=AppContext)
    ctx.resolver = MagicMock()
    ctx.operator = MagicMock()
    ctx.settings = MagicMock()
    ctx.settings.load.return_value = Settings()
    ctx.filesystem = MagicMock()
    return ctx
