# ABOUTME: Logging configuration for Livraria.
# ABOUTME: Routes the livraria logger to a Rich console handler and an optional log file.

import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(
    log_level: str = "INFO",
    log_file: Path | None = None,
    rich_console: bool = True,
) -> logging.Logger:
    """Configure the `livraria` logger.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional file that receives DEBUG and above.
        rich_console: Use a RichHandler on stderr instead of a plain stream handler.

    Returns:
        The configured `livraria` logger.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger("livraria")
    logger.setLevel(logging.DEBUG if log_file else level)
    logger.handlers.clear()

    console_handler: logging.Handler
    if rich_console:
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
        )
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-5s | [%(name)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    return logger
