"""
Tests for the single-entry use cases: cd, pwd, mv, touch and mkdir.
"""

import errno

import pytest

from file_explorer.exceptions import FileRepositoryError
from file_explorer.use_cases.files.change_directory import (
    ChangeDirectoryUseCase,
    PrintWorkingDirectoryUseCase,
)
from file_explorer.use_cases.files.create_entries import (
    MakeDirectoryUseCase,
    TouchFileUseCase,
)
from file_explorer.use_cases.files.move_file import MoveFileUseCase


@pytest.fixture
def deps(memory_fs, working_directory, activity_logger, mock_logger):
    return memory_fs, working_directory, activity_logger, mock_logger


class TestChangeDirectoryUseCase:
    """Test cases for cd and pwd."""

    def test_change_into_existing_directory(self, deps, memory_fs, working_directory, activity_log):
        memory_fs.add_dir("/home/user/docs")

        new_path = ChangeDirectoryUseCase(*deps).execute("docs")

        assert new_path == "/home/user/docs"
        assert working_directory.path == "/home/user/docs"
        assert activity_log.lines == ["[2024-05-17 09:30:15] Changed directory to: docs"]

    def test_change_to_parent(self, deps, working_directory):
        ChangeDirectoryUseCase(*deps).execute("..")

        assert working_directory.path == "/home"

    def test_missing_directory_leaves_context_unchanged(self, deps, working_directory, activity_log):
        with pytest.raises(FileRepositoryError, match="No such file or directory"):
            ChangeDirectoryUseCase(*deps).execute("nowhere")

        assert working_directory.path == "/home/user"
        assert activity_log.lines == [
            "[2024-05-17 09:30:15] Failed to change directory to: nowhere (No such file or directory)"
        ]

    def test_file_is_not_a_directory(self, deps, memory_fs, working_directory):
        memory_fs.add_file("/home/user/file.txt")

        with pytest.raises(FileRepositoryError) as exc:
            ChangeDirectoryUseCase(*deps).execute("file.txt")

        assert exc.value.errno == errno.ENOTDIR
        assert working_directory.path == "/home/user"

    def test_follows_links_to_directories(self, deps, memory_fs, working_directory):
        memory_fs.add_dir("/srv/data")
        memory_fs.add_link("/home/user/data", "/srv/data")

        ChangeDirectoryUseCase(*deps).execute("data")

        assert working_directory.path == "/home/user/data"

    def test_parent_of_link_is_resolved_lexically(self, deps, memory_fs, working_directory):
        memory_fs.add_dir("/srv/data")
        memory_fs.add_link("/home/user/data", "/srv/data")

        ChangeDirectoryUseCase(*deps).execute("data/..")

        assert working_directory.path == "/home/user"

    def test_print_working_directory(self, deps, activity_log):
        assert PrintWorkingDirectoryUseCase(*deps).execute() == "/home/user"
        assert activity_log.lines == ["[2024-05-17 09:30:15] Checked current directory."]


class TestMoveFileUseCase:
    """Test cases for mv."""

    def test_rename(self, deps, memory_fs, activity_log):
        memory_fs.add_file("/home/user/old.txt", "abc")

        MoveFileUseCase(*deps).execute("old.txt", "new.txt")

        assert not memory_fs.exists("/home/user/old.txt")
        assert memory_fs.read_bytes("/home/user/new.txt") == b"abc"
        assert activity_log.lines == ["[2024-05-17 09:30:15] Moved/Renamed: old.txt -> new.txt"]

    def test_cross_device_move_has_no_fallback(self, deps, memory_fs, activity_log):
        """Test that a rename refused by the OS is not retried as copy and delete."""
        memory_fs.add_file("/home/user/big.iso", "data")
        memory_fs.add_dir("/mnt/usb")
        memory_fs.fail_on("rename", "/home/user/big.iso", errno.EXDEV)

        with pytest.raises(FileRepositoryError) as exc:
            MoveFileUseCase(*deps).execute("big.iso", "/mnt/usb/big.iso")

        assert exc.value.errno == errno.EXDEV
        assert memory_fs.exists("/home/user/big.iso")
        assert not memory_fs.exists("/mnt/usb/big.iso")
        assert len(activity_log.lines) == 1
        assert "Failed to move/rename: big.iso -> /mnt/usb/big.iso" in activity_log.lines[0]


class TestCreateEntriesUseCases:
    """Test cases for touch and mkdir."""

    def test_touch_creates_empty_file(self, deps, memory_fs, activity_log):
        entry = TouchFileUseCase(*deps).execute("new.txt")

        assert entry.size == 0
        assert memory_fs.read_bytes("/home/user/new.txt") == b""
        assert activity_log.lines == ["[2024-05-17 09:30:15] Created or updated file: new.txt"]

    def test_touch_existing_keeps_content(self, deps, memory_fs):
        memory_fs.add_file("/home/user/kept.txt", "keep me")
        before = memory_fs.modified("/home/user/kept.txt")

        TouchFileUseCase(*deps).execute("kept.txt")

        assert memory_fs.read_bytes("/home/user/kept.txt") == b"keep me"
        assert memory_fs.modified("/home/user/kept.txt") > before

    def test_touch_in_missing_directory(self, deps):
        with pytest.raises(FileRepositoryError, match="No such file or directory"):
            TouchFileUseCase(*deps).execute("missing/new.txt")

    def test_mkdir(self, deps, memory_fs, activity_log):
        entry = MakeDirectoryUseCase(*deps).execute("projects")

        assert entry.is_dir
        assert memory_fs.stat("/home/user/projects").is_dir
        assert activity_log.lines == ["[2024-05-17 09:30:15] Created directory: projects"]

    def test_mkdir_existing(self, deps, memory_fs, activity_log):
        memory_fs.add_dir("/home/user/projects")

        with pytest.raises(FileRepositoryError, match="File exists"):
            MakeDirectoryUseCase(*deps).execute("projects")

        assert activity_log.lines == [
            "[2024-05-17 09:30:15] Failed to create directory: projects (File exists)"
        ]

    def test_mkdir_does_not_create_parents(self, deps, memory_fs):
        with pytest.raises(FileRepositoryError):
            MakeDirectoryUseCase(*deps).execute("a/b/c")

        assert not memory_fs.exists("/home/user/a")
