"""
Local file system adapter implementation for file operations.
"""

import errno
import logging
import os
import stat as stat_module
from typing import BinaryIO, cast

from typing_extensions import override

from file_explorer.entities.Entry import DirectoryEntry, EntryKind
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_system_port import FileSystemPort


def _kind_from_mode(mode: int) -> EntryKind:
    if stat_module.S_ISLNK(mode):
        return EntryKind.LINK
    if stat_module.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    return EntryKind.FILE


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the file system port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Raises:
            FileRepositoryError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise FileRepositoryError.from_errno(errno.ENOENT, directory)

        if not os.path.isdir(directory):
            raise FileRepositoryError.from_errno(errno.ENOTDIR, directory)

    def _create_entry(self, item: os.DirEntry) -> DirectoryEntry:
        """Build a DirectoryEntry from a scandir item without following links."""
        info = item.stat(follow_symlinks=False)
        return DirectoryEntry(
            name=item.name,
            path=item.path,
            kind=_kind_from_mode(info.st_mode),
            size=info.st_size,
        )

    @override
    def stat(self, path: str, follow_symlinks: bool = False) -> DirectoryEntry:
        try:
            info = os.stat(path) if follow_symlinks else os.lstat(path)
        except OSError as e:
            raise FileRepositoryError.from_os_error(e, path) from e
        return DirectoryEntry(
            name=os.path.basename(path) or path,
            path=path,
            kind=_kind_from_mode(info.st_mode),
            size=info.st_size,
        )

    @override
    def scandir(self, directory: str) -> list[DirectoryEntry]:
        """
        Enumerate a directory, sorted by name.

        Entries that vanish or cannot be stat'ed between enumeration and
        inspection are skipped with a warning.
        """
        self._validate_directory(directory)
        entries: list[DirectoryEntry] = []
        try:
            with os.scandir(directory) as items:
                for item in items:
                    if item.name in (".", ".."):
                        continue
                    try:
                        entries.append(self._create_entry(item))
                    except OSError as e:
                        # Log the error but continue with other entries
                        self._logger.warning(f"Could not process entry {item.path}: {e}")
                        continue
        except OSError as e:
            raise FileRepositoryError.from_os_error(e, directory) from e

        entries.sort(key=lambda entry: entry.name)
        return entries

    @override
    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    @override
    def same_file(self, first: str, second: str) -> bool:
        if not (os.path.exists(first) and os.path.exists(second)):
            return False
        try:
            return os.path.samefile(first, second)
        except OSError as e:
            raise FileRepositoryError.from_os_error(e, second) from e

    @override
    def open_read(self, path: str) -> BinaryIO:
        try:
            return cast(BinaryIO, open(path, "rb"))
        except OSError as e:
            raise FileRepositoryError.from_os_error(e, path) from e

    @override
    def open_write(self, path: str) -> BinaryIO:
        try:
            return cast(BinaryIO, open(path, "wb"))
        except OSError as e:
            raise FileRepositoryError.from_os_error(e, path) from e

    @override
    def touch(self, path: str) -> DirectoryEntry:
        try:
            with open(path, "ab"):
                pass
            os.utime(path, None)
        except OSError as e:
            raise FileRepositoryError.from_os_error(e, path) from e
        return self.stat(path)

    @override
    def rename(self, source: str, destination: str) -> None:
        try:
            os.rename(source, destination)
        except OSError as e:
            raise FileRepositoryError.from_os_error(e, source) from e

    @override
    def mkdir(self, path: str) -> DirectoryEntry:
        try:
            os.mkdir(path)
        except OSError as e:
            raise FileRepositoryError.from_os_error(e, path) from e
        return self.stat(path)

    @override
    def remove_file(self, path: str) -> None:
        try:
            os.remove(path)
        except OSError as e:
            raise FileRepositoryError.from_os_error(e, path) from e

    @override
    def remove_dir(self, path: str) -> None:
        try:
            os.rmdir(path)
        except OSError as e:
            raise FileRepositoryError.from_os_error(e, path) from e
