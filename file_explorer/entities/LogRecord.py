"""
Activity log record entity.
"""

from dataclasses import dataclass
from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LogRecord:
    """One entry of the activity log: when an action happened and what it was."""

    timestamp: datetime
    description: str

    def to_line(self) -> str:
        """Serialize as `[YYYY-MM-DD HH:MM:SS] <description>` (no trailing newline)."""
        # a record always occupies exactly one line
        description = " ".join(self.description.splitlines())
        return f"[{self.timestamp.strftime(TIMESTAMP_FORMAT)}] {description}"
