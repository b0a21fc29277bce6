"""
Use case for recording and reading back user activity.
"""

import logging
from datetime import datetime
from typing import Callable, Iterator, Optional

from file_explorer.entities.LogRecord import LogRecord
from file_explorer.exceptions import ActivityLogError
from file_explorer.ports.activity.activity_log_port import ActivityLogPort


class ActivityLogger:
    """Append-only activity log shared by every shell command."""

    def __init__(
        self,
        activity_log: ActivityLogPort,
        logger: Optional[logging.Logger] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize the use case.

        Args:
            activity_log: Storage for log lines
            logger: Logger instance to use for diagnostics
            clock: Source of record timestamps (local time by default)
        """
        self._activity_log = activity_log
        self._logger = logger or logging.getLogger(__name__)
        self._clock = clock

    def record(self, description: str) -> Optional[LogRecord]:
        """
        Append one timestamped line describing an action.

        Writing is fire-and-forget: a failure is reported to the diagnostic log
        only and never reaches the caller.

        Returns:
            The stored LogRecord, or None if it could not be written
        """
        record = LogRecord(self._clock(), description)
        try:
            self._activity_log.append_line(record.to_line())
        except Exception as e:
            self._logger.warning(f"Could not record activity '{description}': {e}")
            return None
        return record

    def read_all(self) -> Optional[Iterator[str]]:
        """
        Read back every recorded line, oldest first.

        Returns:
            Lazy iterator over the lines, or None when nothing was ever recorded

        Raises:
            ActivityLogError: If the log exists but cannot be read
        """
        if not self._activity_log.exists():
            return None
        try:
            return self._activity_log.iter_lines()
        except ActivityLogError:
            raise
        except Exception as e:
            self._logger.error(f"Error reading activity log: {e}")
            raise ActivityLogError(f"Failed to read activity log: {str(e)}")
