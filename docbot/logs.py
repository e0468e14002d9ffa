"""
Logging setup for docbot.

Every docbot module logs to a child of the "docbot" logger and never configures
handlers itself. Applications that want to see what docbot builds and resolves
call configure() once (or attach their own handlers).
"""
import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER = None


def configure(level=logging.WARNING, /, *, console=None):
    """
    Attach a rich handler to the "docbot" logger and set its level.

    Calling it again replaces the previous handler instead of adding another.

    Returns
    - the "docbot" logging.Logger.
    """
    global _HANDLER
    logger = logging.getLogger("docbot")
    if _HANDLER is not None:
        logger.removeHandler(_HANDLER)
    _HANDLER = RichHandler(console=console or Console(stderr=True), rich_tracebacks=True, show_path=False)
    _HANDLER.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(_HANDLER)
    logger.setLevel(level)
    return logger


__all__ = (
    "configure",
)
