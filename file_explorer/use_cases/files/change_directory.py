"""
Use cases for reading and changing the shell's working directory.
"""

import errno

from file_explorer.exceptions import FileRepositoryError
from file_explorer.use_cases.files.base import FileUseCase


class ChangeDirectoryUseCase(FileUseCase):
    """Move the working directory context; the process directory is left alone."""

    def execute(self, directory: str) -> str:
        """
        Change the working directory.

        Args:
            directory: Target directory, relative or absolute

        Returns:
            The new absolute working directory

        Raises:
            FileRepositoryError: If the target is missing or not a directory.
                The working directory is unchanged in that case.
        """
        target = self._resolve(directory)

        def change() -> str:
            entry = self._file_system.stat(target, follow_symlinks=True)
            if not entry.is_dir:
                raise FileRepositoryError.from_errno(errno.ENOTDIR, directory)
            self._working_directory.change(target)
            return self._working_directory.path

        return self._attempt(
            f"Changed directory to: {directory}",
            f"Failed to change directory to: {directory}",
            change,
        )


class PrintWorkingDirectoryUseCase(FileUseCase):
    """Report the working directory."""

    def execute(self) -> str:
        return self._attempt(
            "Checked current directory.",
            "Failed to check current directory.",
            lambda: self._working_directory.path,
        )
