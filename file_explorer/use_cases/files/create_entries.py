"""
Use cases creating new entries: empty files and directories.
"""

from file_explorer.entities.Entry import DirectoryEntry
from file_explorer.use_cases.files.base import FileUseCase


class TouchFileUseCase(FileUseCase):
    """Create an empty file, or refresh the modification time of an existing one."""

    def execute(self, path: str) -> DirectoryEntry:
        target = self._resolve(path)
        self._logger.info(f"Touching file: {target}")
        return self._attempt(
            f"Created or updated file: {path}",
            f"Failed to create or update file: {path}",
            lambda: self._file_system.touch(target),
        )


class MakeDirectoryUseCase(FileUseCase):
    """Create a single directory; parents are not created."""

    def execute(self, path: str) -> DirectoryEntry:
        target = self._resolve(path)
        self._logger.info(f"Creating directory: {target}")
        return self._attempt(
            f"Created directory: {path}",
            f"Failed to create directory: {path}",
            lambda: self._file_system.mkdir(target),
        )
