"""loguru sink for the CLI: quiet by default, chatty on request."""

import sys
from loguru import logger

_BRIEF = "<level>{message}</level>"
_DETAILED = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def log_level(verbose: bool = False, debug: bool = False) -> str:
    """DEBUG wins over INFO; otherwise only warnings and errors."""
    if debug:
        return "DEBUG"
    return "INFO" if verbose else "WARNING"


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Replace every loguru handler with one stderr sink at the chosen level.

    sys.stderr is looked up on each call so a redirected stream is honoured.
    """
    level = log_level(verbose, debug)
    logger.remove()
    logger.add(sys.stderr, level=level, format=_DETAILED if level == "DEBUG" else _BRIEF, colorize=None)
