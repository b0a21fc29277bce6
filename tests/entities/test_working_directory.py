"""
Tests for the WorkingDirectory context.
"""

import os

from file_explorer.entities.WorkingDirectory import WorkingDirectory


class TestWorkingDirectory:
    """Test cases for the WorkingDirectory context."""

    def test_defaults_to_process_directory(self, tmp_path, monkeypatch):
        """Test initialization from the OS working directory."""
        monkeypatch.chdir(tmp_path)

        assert WorkingDirectory().path == os.path.normpath(os.getcwd())

    def test_resolve_relative_and_absolute(self):
        """Test resolving paths typed by the user."""
        cwd = WorkingDirectory("/home/user")

        assert cwd.resolve("docs") == "/home/user/docs"
        assert cwd.resolve("../other/./x") == "/home/other/x"
        assert cwd.resolve("/etc") == "/etc"
        assert cwd.resolve(".") == "/home/user"

    def test_change_does_not_touch_process_directory(self, tmp_path, monkeypatch):
        """Test that changing the context leaves os.getcwd() alone."""
        monkeypatch.chdir(tmp_path)
        cwd = WorkingDirectory()

        cwd.change("/somewhere/else")

        assert cwd.path == "/somewhere/else"
        assert os.path.samefile(os.getcwd(), tmp_path)

    def test_parent_of_link_is_lexical(self, tmp_path):
        """Test that `link/..` goes back to where the link lives, not above its target."""
        (tmp_path / "far" / "away").mkdir(parents=True)
        (tmp_path / "here").mkdir()
        (tmp_path / "here" / "link").symlink_to(tmp_path / "far" / "away")
        cwd = WorkingDirectory(str(tmp_path / "here"))

        assert cwd.resolve("link/..") == str(tmp_path / "here")
