"""
Use case for copying a file.
"""

import errno
import logging
from typing import Optional

from file_explorer.entities.WorkingDirectory import WorkingDirectory
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_system_port import FileSystemPort
from file_explorer.use_cases.activity.activity_logger import ActivityLogger
from file_explorer.use_cases.files.base import FileUseCase

DEFAULT_CHUNK_SIZE = 4096


class CopyFileUseCase(FileUseCase):
    """Stream a file to a new location in fixed-size chunks."""

    def __init__(
        self,
        file_system: FileSystemPort,
        working_directory: WorkingDirectory,
        activity_logger: ActivityLogger,
        logger: Optional[logging.Logger] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        super().__init__(file_system, working_directory, activity_logger, logger)
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._chunk_size = chunk_size

    def execute(self, source: str, destination: str) -> int:
        """
        Copy `source` to `destination`, replacing it if it exists.

        Args:
            source: File to copy
            destination: Target file path

        Returns:
            Number of bytes copied

        Raises:
            FileRepositoryError: If either side cannot be opened or written
        """
        src = self._resolve(source)
        dst = self._resolve(destination)
        self._logger.info(f"Copying {src} to {dst}")
        return self._attempt(
            f"Copied file: {source} -> {destination}",
            f"Failed to copy file: {source} -> {destination}",
            lambda: self._copy(src, dst),
        )

    def _copy(self, src: str, dst: str) -> int:
        if self._file_system.stat(src, follow_symlinks=True).is_dir:
            raise FileRepositoryError.from_errno(errno.EISDIR, src)
        # opening the destination truncates it, so an alias of the source must be caught here
        if src == dst or self._file_system.same_file(src, dst):
            raise FileRepositoryError("Source and destination are the same file", dst)

        copied = 0
        with self._file_system.open_read(src) as reader:
            with self._file_system.open_write(dst) as writer:
                while True:
                    chunk = reader.read(self._chunk_size)
                    if not chunk:
                        break
                    writer.write(chunk)
                    copied += len(chunk)
        self._logger.debug(f"Copied {copied} bytes")
        return copied
