"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Any, Optional

from rich.console import Console

from file_explorer.adapters.activity.file_activity_log import FileActivityLogAdapter
from file_explorer.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_explorer.config.settings import Settings, settings as default_settings
from file_explorer.entities.WorkingDirectory import WorkingDirectory
from file_explorer.ports.activity.activity_log_port import ActivityLogPort
from file_explorer.ports.files.file_system_port import FileSystemPort
from file_explorer.shell.dispatcher import CommandDispatcher, ShellUseCases
from file_explorer.use_cases.activity.activity_logger import ActivityLogger
from file_explorer.use_cases.files.change_directory import (
    ChangeDirectoryUseCase,
    PrintWorkingDirectoryUseCase,
)
from file_explorer.use_cases.files.copy_file import CopyFileUseCase
from file_explorer.use_cases.files.create_entries import (
    MakeDirectoryUseCase,
    TouchFileUseCase,
)
from file_explorer.use_cases.files.list_files import ListFilesUseCase
from file_explorer.use_cases.files.move_file import MoveFileUseCase
from file_explorer.use_cases.files.remove_tree import RemoveTreeUseCase
from file_explorer.use_cases.files.search_files import SearchFilesUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.

    Every getter builds its object on first use and returns the same instance
    afterwards. Ports can be overridden before first use with `override`.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        activity_log_file: Optional[str] = None,
    ):
        self._settings = settings or default_settings
        self._activity_log_file = activity_log_file or self._settings.activity_log_file
        self._instances: dict[str, Any] = {}
        self._logger = logging.getLogger(__name__)

    def override(self, name: str, instance: Any) -> None:
        """Provide a ready-made instance (e.g. an in-memory adapter) for `name`."""
        self._instances[name] = instance

    def _get(self, name: str, factory) -> Any:
        if name not in self._instances:
            self._instances[name] = factory()
        return self._instances[name]

    def get_console(self) -> Console:
        return self._get("console", lambda: Console(soft_wrap=True))

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        return self._get("file_system", lambda: LocalFileSystemAdapter(self._logger))

    def get_activity_log(self) -> ActivityLogPort:
        """
        Get activity log adapter instance.

        Returns:
            ActivityLogPort implementation
        """
        return self._get(
            "activity_log",
            lambda: FileActivityLogAdapter(self._activity_log_file, self._logger),
        )

    def get_working_directory(self) -> WorkingDirectory:
        return self._get("working_directory", WorkingDirectory)

    def get_activity_logger(self) -> ActivityLogger:
        return self._get(
            "activity_logger",
            lambda: ActivityLogger(self.get_activity_log(), self._logger),
        )

    def _file_use_case(self, name: str, cls, **kwargs) -> Any:
        return self._get(
            name,
            lambda: cls(
                self.get_file_system(),
                self.get_working_directory(),
                self.get_activity_logger(),
                self._logger,
                **kwargs,
            ),
        )

    def get_list_files_use_case(self) -> ListFilesUseCase:
        return self._file_use_case("list_files_use_case", ListFilesUseCase)

    def get_change_directory_use_case(self) -> ChangeDirectoryUseCase:
        return self._file_use_case("change_directory_use_case", ChangeDirectoryUseCase)

    def get_print_working_directory_use_case(self) -> PrintWorkingDirectoryUseCase:
        return self._file_use_case(
            "print_working_directory_use_case", PrintWorkingDirectoryUseCase
        )

    def get_copy_file_use_case(self) -> CopyFileUseCase:
        return self._file_use_case(
            "copy_file_use_case",
            CopyFileUseCase,
            chunk_size=self._settings.copy_chunk_size,
        )

    def get_move_file_use_case(self) -> MoveFileUseCase:
        return self._file_use_case("move_file_use_case", MoveFileUseCase)

    def get_remove_tree_use_case(self) -> RemoveTreeUseCase:
        return self._file_use_case("remove_tree_use_case", RemoveTreeUseCase)

    def get_touch_file_use_case(self) -> TouchFileUseCase:
        return self._file_use_case("touch_file_use_case", TouchFileUseCase)

    def get_make_directory_use_case(self) -> MakeDirectoryUseCase:
        return self._file_use_case("make_directory_use_case", MakeDirectoryUseCase)

    def get_search_files_use_case(self) -> SearchFilesUseCase:
        return self._file_use_case("search_files_use_case", SearchFilesUseCase)

    def get_command_dispatcher(self) -> CommandDispatcher:
        """
        Get the command dispatcher with all use cases injected.

        Returns:
            Configured CommandDispatcher
        """

        def build() -> CommandDispatcher:
            use_cases = ShellUseCases(
                list_files=self.get_list_files_use_case(),
                change_directory=self.get_change_directory_use_case(),
                print_working_directory=self.get_print_working_directory_use_case(),
                copy_file=self.get_copy_file_use_case(),
                move_file=self.get_move_file_use_case(),
                remove_tree=self.get_remove_tree_use_case(),
                touch_file=self.get_touch_file_use_case(),
                make_directory=self.get_make_directory_use_case(),
                search_files=self.get_search_files_use_case(),
                activity_logger=self.get_activity_logger(),
            )
            return CommandDispatcher(
                use_cases,
                self.get_working_directory(),
                console=self.get_console(),
                logger=self._logger,
            )

        return self._get("command_dispatcher", build)

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
