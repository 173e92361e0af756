#!/usr/bin/env python
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from file_explorer import config
from file_explorer.shell import FileExplorer


def setup_logging(level_name=config.LOG_LEVEL):
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def main():
    setup_logging()
    try:
        explorer = FileExplorer()
    except OSError as e:
        # The working directory was removed before we started
        Console(stderr=True).print(Text(f"Startup error: {e}", style="bold red"))
        sys.exit(1)
    explorer.run()
    sys.exit(0)


if __name__ == "__main__":
    main()
