"""
Use case for moving or renaming an entry.
"""

from file_explorer.use_cases.files.base import FileUseCase


class MoveFileUseCase(FileUseCase):
    """Rename with the OS primitive; moves across filesystems fail instead of copying."""

    def execute(self, source: str, destination: str) -> None:
        src = self._resolve(source)
        dst = self._resolve(destination)
        self._logger.info(f"Moving {src} to {dst}")
        self._attempt(
            f"Moved/Renamed: {source} -> {destination}",
            f"Failed to move/rename: {source} -> {destination}",
            lambda: self._file_system.rename(src, dst),
        )
