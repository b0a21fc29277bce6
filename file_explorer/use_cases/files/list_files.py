"""
Use case for listing the entries of a directory.
"""

from file_explorer.entities.Entry import DirectoryEntry
from file_explorer.use_cases.files.base import FileUseCase


class ListFilesUseCase(FileUseCase):
    """Use case for listing files and folders in a directory."""

    def execute(self, directory: str = ".") -> list[DirectoryEntry]:
        """
        List all entries in a directory.

        Args:
            directory: Path to the directory, relative to the working directory

        Returns:
            List of DirectoryEntry, in enumeration order

        Raises:
            FileRepositoryError: If the directory cannot be opened
        """
        target = self._resolve(directory)
        self._logger.info(f"Listing files in directory: {target}")
        entries = self._attempt(
            f"Listed contents of: {directory}",
            f"Failed to list contents of: {directory}",
            lambda: self._file_system.scandir(target),
        )
        self._logger.info(f"Found {len(entries)} entries")
        return entries
