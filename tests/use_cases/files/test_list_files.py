"""
Tests for the ListFilesUseCase.
"""

from unittest.mock import MagicMock

import pytest

from file_explorer.entities.Entry import DirectoryEntry, EntryKind
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_system_port import FileSystemPort
from file_explorer.use_cases.files.list_files import ListFilesUseCase


class TestListFilesUseCase:
    """Test cases for the ListFilesUseCase."""

    def test_execute_success(self, working_directory, activity_logger, activity_log, mock_logger):
        """Test successful execution of list files use case."""
        # Create mock file system
        mock_fs = MagicMock(spec=FileSystemPort)
        entries = [
            DirectoryEntry("a.txt", "/home/user/docs/a.txt", EntryKind.FILE, 100),
            DirectoryEntry("sub", "/home/user/docs/sub", EntryKind.DIRECTORY),
        ]
        mock_fs.scandir.return_value = entries

        use_case = ListFilesUseCase(mock_fs, working_directory, activity_logger, mock_logger)
        result = use_case.execute("docs")

        # Verify result
        assert result == entries

        # Verify relative path was resolved against the working directory
        mock_fs.scandir.assert_called_once_with("/home/user/docs")

        # Verify logging
        mock_logger.info.assert_any_call("Listing files in directory: /home/user/docs")
        mock_logger.info.assert_any_call("Found 2 entries")
        assert activity_log.lines == ["[2024-05-17 09:30:15] Listed contents of: docs"]

    def test_execute_defaults_to_working_directory(
        self, memory_fs, working_directory, activity_logger, mock_logger
    ):
        """Test listing without a path."""
        memory_fs.add_file("/home/user/readme.md", "hi")

        use_case = ListFilesUseCase(memory_fs, working_directory, activity_logger, mock_logger)
        result = use_case.execute()

        assert [e.name for e in result] == ["readme.md"]
        assert result[0].size == 2

    def test_execute_repository_error(
        self, working_directory, activity_logger, activity_log, mock_logger
    ):
        """Test execution when the directory cannot be opened."""
        mock_fs = MagicMock(spec=FileSystemPort)
        mock_fs.scandir.side_effect = FileRepositoryError(
            "No such file or directory", "/home/user/missing", 2
        )

        use_case = ListFilesUseCase(mock_fs, working_directory, activity_logger, mock_logger)

        with pytest.raises(FileRepositoryError, match="No such file or directory"):
            use_case.execute("missing")

        # The failed attempt is still recorded
        assert activity_log.lines == [
            "[2024-05-17 09:30:15] Failed to list contents of: missing (No such file or directory)"
        ]
        mock_logger.error.assert_not_called()

    def test_execute_unexpected_error(
        self, working_directory, activity_logger, activity_log, mock_logger
    ):
        """Test execution when the file system raises an unexpected exception."""
        mock_fs = MagicMock(spec=FileSystemPort)
        mock_fs.scandir.side_effect = Exception("Unexpected error")

        use_case = ListFilesUseCase(mock_fs, working_directory, activity_logger, mock_logger)

        with pytest.raises(FileRepositoryError, match="Unexpected error"):
            use_case.execute("docs")

        mock_logger.error.assert_called_once_with("Unexpected error: Unexpected error")
        assert len(activity_log.lines) == 1

    def test_initialization_without_logger(self, working_directory, activity_logger):
        """Test use case initialization without providing a logger."""
        mock_fs = MagicMock(spec=FileSystemPort)

        use_case = ListFilesUseCase(mock_fs, working_directory, activity_logger)

        assert use_case._logger is not None
        assert use_case._file_system == mock_fs
