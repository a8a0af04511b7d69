"""Tests for directory content and file operations."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from pathlib import Path
from unittest.mock import MagicMock, call

import pytest

from pathinfo.exceptions import AlreadyExistsError, ChildFileNotFoundError
from pathinfo.operations import (
    TreeOperator,
    copy_content_to,
    copy_file_into,
    delete_content,
    move_file_into,
    try_delete,
)
from pathinfo.types import CopyPolicy, DirectoryHandle, FileHandle

EXTRA_FILE_NAMES = ("ChildFile1.txt", "ChildFile2.txt", "ChildFile3.txt")


@pytest.fixture
def operator() -> TreeOperator:
    """Create an operator on the real filesystem."""
    return TreeOperator.create()


class TestDeleteContent:
    """Tests for TreeOperator.delete_content."""

    def test_deletes_all_files_and_directories(
        self, operator: TreeOperator, source_root: DirectoryHandle
    ) -> None:
        """Test every child is removed while the directory remains."""
        operator.delete_content(source_root)

        assert source_root.exists is True
        assert list(source_root.path.iterdir()) == []

    def test_missing_directory_is_noop(self, operator: TreeOperator, tmp_path: Path) -> None:
        """Test a missing directory is left missing without error."""
        missing = DirectoryHandle(tmp_path / "NonExistent")

        operator.delete_content(missing)

        assert missing.exists is False

    def test_removes_links_without_following(
        self, operator: TreeOperator, source_root: DirectoryHandle, tmp_path: Path
    ) -> None:
        """Test a link to an outside directory is removed, not its target."""
        outside = tmp_path / "Outside"
        outside.mkdir()
        (outside / "keep.txt").write_text("keep")
        try:
            (source_root.path / "Link").symlink_to(outside, target_is_directory=True)
        except OSError:
            pytest.skip("symlinks not supported")

        operator.delete_content(source_root)

        assert list(source_root.path.iterdir()) == []
        assert (outside / "keep.txt").read_text() == "keep"

    def test_module_function(self, source_root: DirectoryHandle) -> None:
        """Test the module-level convenience function."""
        delete_content(source_root)

        assert list(source_root.path.iterdir()) == []


class TestCopyContentTo:
    """Tests for TreeOperator.copy_content_to."""

    @pytest.mark.parametrize(
        ("copy_empty", "overwrite", "clean", "populate_target", "empty_dir_exists", "extra_exists"),
        [
            (False, False, False, False, False, False),
            (True, False, False, False, True, False),
            (False, True, False, True, False, True),
            (True, True, True, True, True, False),
        ],
    )
    def test_copies(
        self,
        operator: TreeOperator,
        source_root: DirectoryHandle,
        destination_root: DirectoryHandle,
        write_files: Callable[[Path, Iterable[str]], None],
        file_hash: Callable[[Path], str],
        copy_empty: bool,
        overwrite: bool,
        clean: bool,
        populate_target: bool,
        empty_dir_exists: bool,
        extra_exists: bool,
    ) -> None:
        """Test each combination of copy options."""
        if populate_target:
            write_files(destination_root.path, EXTRA_FILE_NAMES)
        policy = CopyPolicy(copy_empty_directories=copy_empty, overwrite=overwrite, clean_target=clean)

        operator.copy_content_to(source_root, destination_root, policy)

        assert destination_root.exists is True
        assert (destination_root.path / "ChildDir1").is_dir() is empty_dir_exists
        assert (destination_root.path / "ChildFile3.txt").is_file() is extra_exists
        for relative in ("ChildFile1.txt", "ChildDir2/ChildFile1.txt", "ChildDir2/ChildFile2.txt"):
            assert file_hash(destination_root.path / relative) == file_hash(
                source_root.path / relative
            )

    def test_existing_file_without_overwrite_raises(
        self,
        operator: TreeOperator,
        source_root: DirectoryHandle,
        destination_root: DirectoryHandle,
        write_files: Callable[[Path, Iterable[str]], None],
        file_hash: Callable[[Path], str],
    ) -> None:
        """Test a colliding file fails the copy and keeps its content."""
        write_files(destination_root.path, ["ChildFile1.txt"])
        before = file_hash(destination_root.path / "ChildFile1.txt")

        with pytest.raises(AlreadyExistsError, match="already exists"):
            operator.copy_content_to(source_root, destination_root)

        assert file_hash(destination_root.path / "ChildFile1.txt") == before

    def test_clean_target_runs_before_copy(
        self,
        operator: TreeOperator,
        source_root: DirectoryHandle,
        destination_root: DirectoryHandle,
        write_files: Callable[[Path, Iterable[str]], None],
    ) -> None:
        """Test cleaning removes collisions so no overwrite is needed."""
        write_files(destination_root.path, EXTRA_FILE_NAMES)

        operator.copy_content_to(source_root, destination_root, CopyPolicy(clean_target=True))

        names = sorted(p.name for p in destination_root.path.iterdir())
        assert names == ["ChildDir2", "ChildFile1.txt", "ChildFile2.txt"]

    def test_missing_source_is_noop(
        self, operator: TreeOperator, tmp_path: Path, destination_root: DirectoryHandle
    ) -> None:
        """Test nothing happens when the source does not exist."""
        missing = DirectoryHandle(tmp_path / "NonExistent")

        operator.copy_content_to(missing, destination_root)

        assert missing.exists is False
        assert destination_root.exists is False

    def test_copy_empty_directories_after_files(
        self, source_root: DirectoryHandle, destination_root: DirectoryHandle
    ) -> None:
        """Test a second copy with empty directories adds the missing ones."""
        copy_content_to(source_root, destination_root)
        assert not (destination_root.path / "ChildDir1").exists()

        copy_content_to(source_root, destination_root, copy_empty_directories=True, overwrite=True)

        assert (destination_root.path / "ChildDir1").is_dir()

    def test_destination_nested_in_source(
        self, operator: TreeOperator, source_root: DirectoryHandle
    ) -> None:
        """Test copying into a subdirectory of the source copies one level only."""
        destination = DirectoryHandle(source_root.path / "Out")

        operator.copy_content_to(
            source_root, destination, CopyPolicy(copy_empty_directories=True)
        )

        assert (destination.path / "ChildDir1").is_dir()
        assert (destination.path / "ChildDir2" / "ChildFile2.txt").is_file()
        assert (destination.path / "ChildFile1.txt").is_file()
        assert not (destination.path / "Out").exists()

    def test_clean_target_with_mock(self, mock_filesystem: MagicMock) -> None:
        """Test clean_target empties an existing destination first."""
        source = DirectoryHandle("/fake/source")
        destination = DirectoryHandle("/fake/destination")
        mock_filesystem.is_dir.side_effect = lambda path: path in (source.path, destination.path)
        mock_filesystem.iterdir.return_value = []
        mock_filesystem.walk.side_effect = lambda path: iter([(str(path), [], ["a.txt"])])

        TreeOperator(mock_filesystem).copy_content_to(
            source, destination, CopyPolicy(clean_target=True)
        )

        mock_filesystem.iterdir.assert_called_once_with(destination.path)
        mock_filesystem.copy_file.assert_called_once_with(
            source.path / "a.txt", destination.path / "a.txt"
        )


class TestMoveFileInto:
    """Tests for TreeOperator.move_file_into."""

    @pytest.mark.parametrize(
        ("source_name", "destination_name", "overwrite", "create_destination"),
        [
            ("ChildFile1.txt", "ChildDir3/ChildFile3.txt", False, False),
            ("ChildFile1.txt", "ChildDir2/ChildFile1.txt", True, False),
            ("ChildFile1.txt", "ChildDir2/ChildFile1.txt", True, True),
        ],
    )
    def test_moves(
        self,
        operator: TreeOperator,
        source_root: DirectoryHandle,
        destination_root: DirectoryHandle,
        write_files: Callable[[Path, Iterable[str]], None],
        file_hash: Callable[[Path], str],
        source_name: str,
        destination_name: str,
        overwrite: bool,
        create_destination: bool,
    ) -> None:
        """Test the file moves and the source handle keeps its path."""
        source = FileHandle(source_root.path / source_name)
        destination = FileHandle(destination_root.path / destination_name)
        source_hash = file_hash(source.path)
        destination_hash = ""
        if create_destination:
            write_files(destination.path.parent, [destination.name])
            destination_hash = file_hash(destination.path)

        operator.move_file_into(destination, source, overwrite)

        assert source.path == source_root.path / source_name
        assert source.exists is False
        assert destination.exists is True
        assert file_hash(destination.path) == source_hash
        assert file_hash(destination.path) != destination_hash

    def test_missing_source_raises(
        self, operator: TreeOperator, source_root: DirectoryHandle, destination_root: DirectoryHandle
    ) -> None:
        """Test a missing source raises with its full path."""
        source = FileHandle(source_root.path / "ChildFile3.txt")
        destination = FileHandle(destination_root.path / "ChildDir3/ChildFile3.txt")
        message = f"The source file '{source.full_name}' does not exist."

        with pytest.raises(ChildFileNotFoundError, match=f"^{re.escape(message)}$"):
            operator.move_file_into(destination, source)

    def test_existing_destination_without_overwrite_raises(
        self,
        operator: TreeOperator,
        source_root: DirectoryHandle,
        destination_root: DirectoryHandle,
        write_files: Callable[[Path, Iterable[str]], None],
        file_hash: Callable[[Path], str],
    ) -> None:
        """Test both files are untouched when the destination exists."""
        source = FileHandle(source_root.path / "ChildFile1.txt")
        destination = FileHandle(destination_root.path / "ChildDir2/ChildFile1.txt")
        write_files(destination.path.parent, [destination.name])
        destination_hash = file_hash(destination.path)
        message = (
            f"The destination file '{destination.full_name}' already exists "
            "and overwrite is not set to true."
        )

        with pytest.raises(AlreadyExistsError, match=f"^{re.escape(message)}$"):
            operator.move_file_into(destination, source, overwrite=False)

        assert source.exists is True
        assert file_hash(destination.path) == destination_hash

    def test_already_exists_is_file_exists_error(
        self, source_root: DirectoryHandle
    ) -> None:
        """Test the collision error can be caught as FileExistsError."""
        source = FileHandle(source_root.path / "ChildFile1.txt")
        destination = FileHandle(source_root.path / "ChildFile2.txt")

        with pytest.raises(FileExistsError):
            move_file_into(destination, source)

    def test_overwrite_deletes_destination_first(self, mock_filesystem: MagicMock) -> None:
        """Test the existing destination is removed before the move."""
        source = FileHandle("/fake/a.txt")
        destination = FileHandle("/fake/out/b.txt")
        mock_filesystem.is_file.return_value = True

        TreeOperator(mock_filesystem).move_file_into(destination, source, overwrite=True)

        assert mock_filesystem.method_calls[-3:] == [
            call.unlink(destination.path),
            call.mkdir(destination.path.parent, parents=True, exist_ok=True),
            call.move(source.path, destination.path),
        ]


class TestCopyFileInto:
    """Tests for TreeOperator.copy_file_into."""

    @pytest.mark.parametrize(
        ("source_name", "destination_name", "overwrite", "create_destination"),
        [
            ("ChildFile1.txt", "ChildDir3/ChildFile3.txt", False, False),
            ("ChildFile1.txt", "ChildDir2/ChildFile1.txt", True, False),
            ("ChildFile1.txt", "ChildDir2/ChildFile1.txt", True, True),
        ],
    )
    def test_copies(
        self,
        operator: TreeOperator,
        source_root: DirectoryHandle,
        destination_root: DirectoryHandle,
        write_files: Callable[[Path, Iterable[str]], None],
        file_hash: Callable[[Path], str],
        source_name: str,
        destination_name: str,
        overwrite: bool,
        create_destination: bool,
    ) -> None:
        """Test the file is copied and the source is unchanged."""
        source = FileHandle(source_root.path / source_name)
        destination = FileHandle(destination_root.path / destination_name)
        source_hash = file_hash(source.path)
        destination_hash = ""
        if create_destination:
            write_files(destination.path.parent, [destination.name])
            destination_hash = file_hash(destination.path)

        operator.copy_file_into(destination, source, overwrite)

        assert source.exists is True
        assert destination.exists is True
        assert file_hash(destination.path) == source_hash
        assert file_hash(destination.path) != destination_hash
        assert file_hash(source.path) == source_hash

    def test_missing_source_raises(
        self, operator: TreeOperator, source_root: DirectoryHandle, destination_root: DirectoryHandle
    ) -> None:
        """Test a missing source raises with its full path."""
        source = FileHandle(source_root.path / "ChildFile3.txt")
        destination = FileHandle(destination_root.path / "ChildDir3/ChildFile3.txt")
        message = f"The source file {source.full_name} does not exist."

        with pytest.raises(ChildFileNotFoundError, match=f"^{re.escape(message)}$"):
            operator.copy_file_into(destination, source)

    def test_existing_destination_without_overwrite_raises(
        self,
        source_root: DirectoryHandle,
        destination_root: DirectoryHandle,
        write_files: Callable[[Path, Iterable[str]], None],
    ) -> None:
        """Test a colliding destination raises with its full path."""
        source = FileHandle(source_root.path / "ChildFile1.txt")
        destination = FileHandle(destination_root.path / "ChildDir2/ChildFile1.txt")
        write_files(destination.path.parent, [destination.name])
        message = f"The file '{destination.full_name}' already exists."

        with pytest.raises(AlreadyExistsError, match=f"^{re.escape(message)}$"):
            copy_file_into(destination, source)


class TestTryDelete:
    """Tests for TreeOperator.try_delete."""

    @pytest.mark.parametrize("name", ["ChildFile1.txt", "ChildFile3.txt"])
    def test_does_not_raise(
        self, operator: TreeOperator, source_root: DirectoryHandle, name: str
    ) -> None:
        """Test existing and missing files both end up absent."""
        file = FileHandle(source_root.path / name)

        operator.try_delete(file)

        assert file.exists is False

    def test_idempotent(self, source_root: DirectoryHandle) -> None:
        """Test deleting twice never fails."""
        file = FileHandle(source_root.path / "ChildFile2.txt")

        try_delete(file)
        try_delete(file)

        assert file.exists is False

    def test_missing_parent_directory(self, tmp_path: Path) -> None:
        """Test a file under a missing directory is a no-op."""
        file = FileHandle(tmp_path / "Missing" / "file.txt")

        try_delete(file)

        assert file.exists is False

    def test_directory_is_left_alone(
        self, operator: TreeOperator, source_root: DirectoryHandle
    ) -> None:
        """Test a directory at the path is not a file and is not deleted."""
        operator.try_delete(FileHandle(source_root.path / "ChildDir2"))

        assert (source_root.path / "ChildDir2").is_dir()
