"""
Activity log port interface: a durable, append-only store of text lines.
"""

from abc import ABC, abstractmethod
from typing import Iterator


class ActivityLogPort(ABC):
    """Port interface for the activity log storage."""

    @abstractmethod
    def append_line(self, line: str) -> None:
        """
        Append one line, creating the store if it does not exist yet.

        Args:
            line: Text without trailing newline

        Raises:
            ActivityLogError: If the line cannot be written
        """
        pass

    @abstractmethod
    def exists(self) -> bool:
        """Check whether anything was ever written."""
        pass

    @abstractmethod
    def iter_lines(self) -> Iterator[str]:
        """
        Lazily yield stored lines in write order, without trailing newlines.

        Raises:
            ActivityLogError: If the store cannot be read
        """
        pass
