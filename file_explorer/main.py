"""
Console entry point: `file-explorer`.
"""

import argparse
import logging
import sys

from rich.text import Text

from file_explorer.config.settings import settings
from file_explorer.container import DependencyContainer

BANNER = """---------------------------------------------
   SIMPLE CONSOLE FILE EXPLORER
---------------------------------------------"""


def _configure_logging(verbosity: int) -> None:
    level = settings.log_level
    if verbosity == 1:
        level = min(level, logging.INFO)
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="file-explorer",
        description="Interactive file explorer that records every action in an activity log.",
    )
    parser.add_argument(
        "--activity-log",
        default=None,
        help=f"Activity log file (default: {settings.activity_log_file})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Diagnostic output on stderr (-v info, -vv debug)",
    )
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    container = DependencyContainer(activity_log_file=args.activity_log)
    console = container.get_console()
    dispatcher = container.get_command_dispatcher()

    console.print(Text(BANNER))
    try:
        return dispatcher.run(lambda prompt: console.input(Text(prompt)))
    except KeyboardInterrupt:
        console.print()
        return 130


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
