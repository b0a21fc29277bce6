"""
Flat text file implementation of the activity log port.
"""

import logging
import os
from typing import Iterator

from typing_extensions import override

from file_explorer.exceptions import ActivityLogError
from file_explorer.ports.activity.activity_log_port import ActivityLogPort


class FileActivityLogAdapter(ActivityLogPort):
    """
    Activity log stored as one UTF-8 line per record.

    The file is opened, appended to and closed inside every call; no handle is
    kept between commands. Concurrent writers from other processes are not
    coordinated.
    """

    def __init__(self, path: str, logger: logging.Logger | None = None):
        """
        Initialize the adapter.

        Args:
            path: Location of the log file. Relative paths are resolved once, here,
                against the process working directory.
            logger: Logger instance to use for logging
        """
        self.path: str = os.path.abspath(path)
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def append_line(self, line: str) -> None:
        try:
            with open(self.path, "a", encoding="utf-8") as log:
                log.write(line + "\n")
        except OSError as e:
            raise ActivityLogError(f"Cannot write activity log {self.path}: {e}") from e

    @override
    def exists(self) -> bool:
        return os.path.isfile(self.path)

    @override
    def iter_lines(self) -> Iterator[str]:
        try:
            log = open(self.path, "r", encoding="utf-8", errors="replace")
        except OSError as e:
            raise ActivityLogError(f"Cannot read activity log {self.path}: {e}") from e
        return self._read(log)

    def _read(self, log) -> Iterator[str]:
        with log:
            for line in log:
                yield line.rstrip("\r\n")
