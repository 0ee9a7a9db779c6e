"""Leveled, colored log sink passed explicitly to the components that use it.

Messages are routed through a stdlib logger rendered by rich. In debug mode
each line is annotated with the ``file:line`` of the caller.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "devspace"


class Log:
    """Log sink with fatal/error/debug levels."""

    def __init__(self, debug: bool = False, console: Optional[Console] = None,
                 name: str = LOGGER_NAME):
        """Initialize the sink and (re)configure the named logger."""
        self.level = logging.DEBUG if debug else logging.INFO
        self.console = console or Console(stderr=True)
        self.logger = logging.getLogger(name)
        self.logger.setLevel(self.level)
        self.logger.propagate = False

        handler = RichHandler(
            console=self.console,
            level=self.level,
            show_time=False,
            show_path=debug,
            markup=False,
            rich_tracebacks=debug,
        )
        self.logger.handlers = [handler]

    def debug(self, msg: str, *args) -> None:
        self.logger.debug(msg, *args, stacklevel=2)

    def error(self, msg, *args) -> None:
        self.logger.error(str(msg), *args, stacklevel=2)

    def fatal(self, msg, *args) -> None:
        """Log at CRITICAL and terminate the process with status 1."""
        self.logger.critical(str(msg), *args, stacklevel=2)
        raise SystemExit(1)
