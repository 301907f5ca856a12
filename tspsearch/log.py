import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level=logging.ERROR):
    """
    Route log records through rich on stderr, showing level, file and line.

    Only errors are shown by default.
    """
    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=True)
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)
    return handler
