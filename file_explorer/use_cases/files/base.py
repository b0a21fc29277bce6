"""
Shared plumbing for the file use cases.
"""

import logging
from typing import Callable, Optional, TypeVar, Union

from file_explorer.entities.WorkingDirectory import WorkingDirectory
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_system_port import FileSystemPort
from file_explorer.use_cases.activity.activity_logger import ActivityLogger

T = TypeVar("T")


class FileUseCase:
    """Base class for operations that resolve paths and record their outcome."""

    def __init__(
        self,
        file_system: FileSystemPort,
        working_directory: WorkingDirectory,
        activity_logger: ActivityLogger,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port for filesystem primitives
            working_directory: Context used to resolve relative paths
            activity_logger: Where every attempted action is recorded
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._working_directory = working_directory
        self._activity_logger = activity_logger
        self._logger = logger or logging.getLogger(__name__)

    def _resolve(self, path: str) -> str:
        return self._working_directory.resolve(path)

    def _attempt(
        self,
        done: Union[str, Callable[[T], str]],
        failed: str,
        operation: Callable[[], T],
    ) -> T:
        """
        Run `operation` and record exactly one activity line for it.

        Args:
            done: Description recorded on success, or a function building it
                from the operation's result
            failed: Description recorded on failure; the reason is appended
            operation: The filesystem work

        Raises:
            FileRepositoryError: If the operation fails
        """
        try:
            result = operation()
        except FileRepositoryError as e:
            self._logger.info(f"{failed} ({e.reason})")
            self._activity_logger.record(f"{failed} ({e.reason})")
            raise
        except Exception as e:
            self._logger.error(f"Unexpected error: {e}")
            self._activity_logger.record(f"{failed} ({e})")
            raise FileRepositoryError(str(e)) from e
        self._activity_logger.record(done if isinstance(done, str) else done(result))
        return result
