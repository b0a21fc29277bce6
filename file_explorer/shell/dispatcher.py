"""
Command dispatcher: the read-eval-print loop of the file explorer.

Each input line is split on whitespace; the first token picks a command from a
fixed table, the remaining tokens are positional arguments. A command with too
few arguments prints its usage and touches nothing, not even the activity log.
"""

import logging
import os
from dataclasses import dataclass
from typing import Callable, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from file_explorer.entities.CommandLine import CommandLine
from file_explorer.entities.Entry import DirectoryEntry
from file_explorer.entities.WorkingDirectory import WorkingDirectory
from file_explorer.exceptions import BaseAppError
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

UNKNOWN_COMMAND_MESSAGE = "Unknown command. Type 'help' for list."
NO_HISTORY_MESSAGE = "No activity history found yet."
GOODBYE_MESSAGE = "Goodbye! Have a nice day :)"


@dataclass(frozen=True)
class CommandSpec:
    """One row of the command table."""

    name: str
    usage: str
    summary: str
    handler: Optional[Callable[[list[str]], None]]
    min_args: int = 0
    aliases: tuple[str, ...] = ()
    # ends the loop instead of running a handler
    terminates: bool = False


@dataclass(frozen=True)
class ShellUseCases:
    """Everything the dispatcher can invoke."""

    list_files: ListFilesUseCase
    change_directory: ChangeDirectoryUseCase
    print_working_directory: PrintWorkingDirectoryUseCase
    copy_file: CopyFileUseCase
    move_file: MoveFileUseCase
    remove_tree: RemoveTreeUseCase
    touch_file: TouchFileUseCase
    make_directory: MakeDirectoryUseCase
    search_files: SearchFilesUseCase
    activity_logger: ActivityLogger


class CommandDispatcher:
    """Reads command lines, runs the matching use case and prints the outcome."""

    def __init__(
        self,
        use_cases: ShellUseCases,
        working_directory: WorkingDirectory,
        console: Optional[Console] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            use_cases: Use cases backing the commands
            working_directory: Context shown in the prompt; shared with the use cases
            console: Where output goes (stdout by default)
            logger: Logger instance to use for diagnostics
        """
        self._use_cases = use_cases
        self._working_directory = working_directory
        self._console = console or Console(soft_wrap=True)
        self._logger = logger or logging.getLogger(__name__)
        self._commands: dict[str, CommandSpec] = {}
        self._register_builtin_commands()

    # ------------------------- command table -------------------------
    def register_command(self, spec: CommandSpec) -> None:
        for name in (spec.name, *spec.aliases):
            self._commands[name] = spec

    def commands(self) -> list[CommandSpec]:
        """Registered commands, in registration order, aliases folded."""
        unique: list[CommandSpec] = []
        for spec in self._commands.values():
            if spec not in unique:
                unique.append(spec)
        return unique

    def _register_builtin_commands(self) -> None:
        table = [
            CommandSpec("ls", "ls [path]", "List files and folders", self._cmd_ls),
            CommandSpec("cd", "cd <dir>", "Change directory", self._cmd_cd, 1),
            CommandSpec("pwd", "pwd", "Print current directory", self._cmd_pwd),
            CommandSpec("cp", "cp <src> <dest>", "Copy file", self._cmd_cp, 2),
            CommandSpec("mv", "mv <src> <dest>", "Move or rename file", self._cmd_mv, 2),
            CommandSpec("rm", "rm <path>", "Delete file/folder", self._cmd_rm, 1),
            CommandSpec("touch", "touch <file>", "Create empty file", self._cmd_touch, 1),
            CommandSpec("mkdir", "mkdir <dir>", "Create new folder", self._cmd_mkdir, 1),
            CommandSpec(
                "search",
                "search <pattern> [path]",
                "Search file by name",
                self._cmd_search,
                1,
            ),
            CommandSpec("history", "history", "Show activity log", self._cmd_history),
            CommandSpec("help", "help", "Show help menu", self._cmd_help),
            CommandSpec(
                "exit",
                "exit",
                "Exit explorer",
                None,
                aliases=("quit",),
                terminates=True,
            ),
        ]
        for spec in table:
            self.register_command(spec)

    # ------------------------- loop -------------------------
    def prompt(self) -> str:
        return f"{self._working_directory.path} $ "

    def run(self, read_line: Callable[[str], str]) -> int:
        """
        Loop until `exit`/`quit` or end of input.

        Args:
            read_line: Shows the prompt and returns one line; raises EOFError
                when input is exhausted

        Returns:
            Process exit code (always 0)
        """
        self._print("Type 'help' to see available commands.")
        while True:
            try:
                line = read_line(self.prompt())
            except EOFError:
                self._console.print()
                break
            if not self.dispatch(line):
                break
        self._print(GOODBYE_MESSAGE)
        return 0

    def dispatch(self, line: str) -> bool:
        """
        Execute one command line.

        Returns:
            False when the line asks to leave the loop, True otherwise
        """
        command = CommandLine(line)
        if command.is_empty():
            return True

        spec = self._commands.get(command.name)
        if spec is None:
            self._print(UNKNOWN_COMMAND_MESSAGE, style="yellow")
            return True
        if spec.terminates:
            return False
        if len(command.args) < spec.min_args:
            self._print(f"Usage: {spec.usage}", style="yellow")
            return True

        self._logger.debug(f"Dispatching '{command.raw}'")
        try:
            spec.handler(command.args)
        except BaseAppError as e:
            self._print(f"{command.name}: {e}", style="red")
        except Exception as e:
            self._logger.exception(f"Unexpected error running '{command.raw}'")
            self._print(f"{command.name}: unexpected error: {e}", style="red")
        return True

    # ------------------------- output -------------------------
    def _print(self, message: str, style: str = "") -> None:
        # Text keeps brackets in paths and markers from being read as markup;
        # one message is one output line whatever the terminal width
        self._console.print(Text(message, style=style), soft_wrap=True)

    def _display_path(self, entry: DirectoryEntry, root: str, start: str) -> str:
        return os.path.join(start, os.path.relpath(entry.path, root))

    # ------------------------- handlers -------------------------
    def _cmd_ls(self, args: list[str]) -> None:
        path = args[0] if args else "."
        entries = self._use_cases.list_files.execute(path)
        self._print(f"Contents of {path}:")
        for entry in entries:
            style = "bold blue" if entry.is_dir else ("cyan" if entry.is_link else "")
            self._print(str(entry), style=style)

    def _cmd_cd(self, args: list[str]) -> None:
        self._use_cases.change_directory.execute(args[0])
        self._print(f"Changed directory to: {args[0]}")

    def _cmd_pwd(self, args: list[str]) -> None:
        self._print(self._use_cases.print_working_directory.execute())

    def _cmd_cp(self, args: list[str]) -> None:
        source, destination = args[0], args[1]
        self._use_cases.copy_file.execute(source, destination)
        self._print(f"Copied: {source} -> {destination}")

    def _cmd_mv(self, args: list[str]) -> None:
        source, destination = args[0], args[1]
        self._use_cases.move_file.execute(source, destination)
        self._print(f"Moved: {source} -> {destination}")

    def _cmd_rm(self, args: list[str]) -> None:
        # partial failures are not reported; what is left stays on disk
        if self._use_cases.remove_tree.execute(args[0]) == 0:
            self._print(f"Removed: {args[0]}")

    def _cmd_touch(self, args: list[str]) -> None:
        self._use_cases.touch_file.execute(args[0])
        self._print(f"File created/updated: {args[0]}")

    def _cmd_mkdir(self, args: list[str]) -> None:
        self._use_cases.make_directory.execute(args[0])
        self._print(f"Directory created: {args[0]}")

    def _cmd_search(self, args: list[str]) -> None:
        pattern = args[0]
        start = args[1] if len(args) > 1 else "."
        root = self._working_directory.resolve(start)
        self._use_cases.search_files.execute(
            pattern,
            start,
            on_match=lambda entry: self._print(self._display_path(entry, root, start)),
        )

    def _cmd_history(self, args: list[str]) -> None:
        lines = self._use_cases.activity_logger.read_all()
        if lines is None:
            self._print(NO_HISTORY_MESSAGE)
            return
        self._print("----------- ACTIVITY LOG -----------")
        for line in lines:
            self._print(line)
        self._print("------------------------------------")

    def _cmd_help(self, args: list[str]) -> None:
        table = Table(title="Available Commands", box=box.SIMPLE, show_header=False)
        table.add_column("command", no_wrap=True)
        table.add_column("description")
        for spec in self.commands():
            table.add_row(Text(spec.usage, style="bold"), Text(spec.summary))
        self._console.print(table)
