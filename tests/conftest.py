"""
Pytest configuration and shared fixtures.
"""

import io
import os
import tempfile
from datetime import datetime
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from file_explorer.adapters.activity.memory_activity_log import (
    InMemoryActivityLogAdapter,
)
from file_explorer.adapters.files.memory_fs_adapter import InMemoryFileSystemAdapter
from file_explorer.container import DependencyContainer
from file_explorer.entities.WorkingDirectory import WorkingDirectory
from file_explorer.shell.dispatcher import CommandDispatcher
from file_explorer.use_cases.activity.activity_logger import ActivityLogger

HOME = "/home/user"
FIXED_TIME = datetime(2024, 5, 17, 9, 30, 15)


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def memory_fs():
    """In-memory tree with an empty home directory."""
    fs = InMemoryFileSystemAdapter()
    fs.add_dir(HOME)
    return fs


@pytest.fixture
def working_directory():
    return WorkingDirectory(HOME)


@pytest.fixture
def activity_log():
    """Activity log store that has never been written."""
    return InMemoryActivityLogAdapter()


@pytest.fixture
def activity_logger(activity_log, mock_logger):
    return ActivityLogger(activity_log, mock_logger, clock=lambda: FIXED_TIME)


class ShellHarness:
    """Dispatcher wired to in-memory adapters, with captured console output."""

    def __init__(self, fs, log, dispatcher, working_directory, console):
        self.fs = fs
        self.log = log
        self.dispatcher = dispatcher
        self.working_directory = working_directory
        self._console = console

    def run(self, line: str) -> str:
        """Dispatch one line and return what it printed."""
        start = len(self.output())
        self.dispatcher.dispatch(line)
        return self.output()[start:]

    def output(self) -> str:
        return self._console.file.getvalue()

    def log_lines(self) -> list[str]:
        return list(self.log.lines or [])


@pytest.fixture
def console():
    return Console(
        file=io.StringIO(),
        width=200,
        color_system=None,
        force_terminal=False,
        soft_wrap=True,
    )


@pytest.fixture
def dependency_container(tmp_path, mock_logger):
    """
    Create a dependency container with a temporary activity log.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(activity_log_file=str(tmp_path / "activity_log.txt"))
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


@pytest.fixture
def shell(memory_fs, activity_log, working_directory, console, mock_logger):
    container = DependencyContainer()
    container._logger = mock_logger
    container.override("file_system", memory_fs)
    container.override("activity_log", activity_log)
    container.override("working_directory", working_directory)
    container.override("console", console)
    dispatcher: CommandDispatcher = container.get_command_dispatcher()
    return ShellHarness(memory_fs, activity_log, dispatcher, working_directory, console)
