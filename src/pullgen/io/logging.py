"""Define utility functions to simplify logging to the CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("pullgen")
console = Console()


def configure_logging(verbose: bool = False) -> None:
    """Route the package's log messages through the shared rich console.

    :param verbose: Whether to include debug messages (defaults to False)
    """
    handler = RichHandler(console=console, show_path=False)
    logging.basicConfig(format="%(message)s", handlers=[handler])
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def log_info(message: str) -> None:
    """Log the given string to standard output."""
    logger.info(message)
