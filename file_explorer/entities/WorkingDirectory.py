"""
Working directory context shared by the shell use cases.
"""

import os


class WorkingDirectory:
    """
    Current directory of the shell session.

    Relative paths typed by the user are resolved against this value instead of
    the process working directory, which is never changed.
    """

    def __init__(self, path: str | None = None):
        """
        Initialize the context.

        Args:
            path: Starting directory. Defaults to the process working directory.
        """
        self._path = os.path.normpath(os.path.abspath(path or os.getcwd()))

    @property
    def path(self) -> str:
        return self._path

    def resolve(self, path: str) -> str:
        """
        Return the absolute, normalized form of `path` (relative to this directory).

        `..` is removed lexically, like a shell's logical `cd`: `link/..` is this
        directory even when `link` points elsewhere.
        """
        return os.path.normpath(os.path.join(self._path, path))

    def change(self, path: str) -> None:
        """Point the context at an already validated absolute directory."""
        self._path = os.path.normpath(path)

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"WorkingDirectory(path='{self._path}')"
