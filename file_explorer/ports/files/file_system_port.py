"""
File system port interface defining the capabilities the explorer relies on.

All paths handed to a port are absolute; resolving what the user typed is the
caller's job.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO

from file_explorer.entities.Entry import DirectoryEntry


class FileSystemPort(ABC):
    """Port interface for filesystem primitives."""

    @abstractmethod
    def stat(self, path: str, follow_symlinks: bool = False) -> DirectoryEntry:
        """
        Describe a single path.

        Args:
            path: Absolute path to inspect
            follow_symlinks: Classify the link target instead of the link itself

        Returns:
            DirectoryEntry for the path

        Raises:
            FileRepositoryError: If the path cannot be inspected
        """
        pass

    @abstractmethod
    def scandir(self, directory: str) -> list[DirectoryEntry]:
        """
        Enumerate the entries of a directory, without `.` and `..`.

        Args:
            directory: Absolute path of the directory to enumerate

        Returns:
            List of DirectoryEntry, in enumeration order

        Raises:
            FileRepositoryError: If the directory cannot be opened
        """
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check whether anything (including a dangling link) lives at `path`."""
        pass

    @abstractmethod
    def same_file(self, first: str, second: str) -> bool:
        """
        Check whether two paths name the same file once links are followed.

        A path that does not exist is never the same file as anything.

        Raises:
            FileRepositoryError: If an existing path cannot be inspected
        """
        pass

    @abstractmethod
    def open_read(self, path: str) -> BinaryIO:
        """
        Open a file for binary reading.

        Raises:
            FileRepositoryError: If the file cannot be opened
        """
        pass

    @abstractmethod
    def open_write(self, path: str) -> BinaryIO:
        """
        Create or truncate a file and open it for binary writing.

        Raises:
            FileRepositoryError: If the file cannot be opened
        """
        pass

    @abstractmethod
    def touch(self, path: str) -> DirectoryEntry:
        """
        Create an empty file if absent, otherwise update its modification time.

        Returns:
            DirectoryEntry for the touched file

        Raises:
            FileRepositoryError: If the file cannot be created or updated
        """
        pass

    @abstractmethod
    def rename(self, source: str, destination: str) -> None:
        """
        Rename or move an entry with the OS rename primitive.

        There is no copy-and-delete fallback: moves across filesystems fail.

        Raises:
            FileRepositoryError: If the rename fails
        """
        pass

    @abstractmethod
    def mkdir(self, path: str) -> DirectoryEntry:
        """
        Create a single directory (parents must exist).

        Returns:
            DirectoryEntry for the created directory

        Raises:
            FileRepositoryError: If the directory cannot be created
        """
        pass

    @abstractmethod
    def remove_file(self, path: str) -> None:
        """
        Remove a file or a symbolic link (never its target).

        Raises:
            FileRepositoryError: If removal fails
        """
        pass

    @abstractmethod
    def remove_dir(self, path: str) -> None:
        """
        Remove an empty directory.

        Raises:
            FileRepositoryError: If removal fails
        """
        pass
