"""
In-memory implementation of the activity log port.
"""

from typing import Iterator

from typing_extensions import override

from file_explorer.exceptions import ActivityLogError
from file_explorer.ports.activity.activity_log_port import ActivityLogPort


class InMemoryActivityLogAdapter(ActivityLogPort):
    """Keeps log lines in a list. `writable = False` simulates an unwritable log."""

    def __init__(self, lines: list[str] | None = None):
        self.lines: list[str] | None = list(lines) if lines is not None else None
        self.writable: bool = True

    @override
    def append_line(self, line: str) -> None:
        if not self.writable:
            raise ActivityLogError("Activity log is not writable")
        if self.lines is None:
            self.lines = []
        self.lines.append(line)

    @override
    def exists(self) -> bool:
        return self.lines is not None

    @override
    def iter_lines(self) -> Iterator[str]:
        if self.lines is None:
            raise ActivityLogError("Activity log does not exist")
        return iter(list(self.lines))
