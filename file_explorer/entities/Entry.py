"""
Directory entry domain entity.
"""

from dataclasses import dataclass
from enum import Enum


class EntryKind(str, Enum):
    """Classification of a directory entry, as reported by lstat."""

    FILE = "file"
    DIRECTORY = "directory"
    LINK = "link"


@dataclass(frozen=True)
class DirectoryEntry:
    """
    Filesystem entry (file, directory or symbolic link) produced while enumerating.

    Entries are transient snapshots: nothing re-reads the filesystem after creation.
    """

    name: str
    path: str
    kind: EntryKind
    size: int = 0

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_link(self) -> bool:
        return self.kind is EntryKind.LINK

    @property
    def marker(self) -> str:
        """Type marker shown in listings."""
        if self.is_dir:
            return "[DIR]"
        if self.is_link:
            return "[LINK]"
        return ""

    def __str__(self) -> str:
        return f"{self.marker:<7}{self.name}\t({self.size} bytes)"
