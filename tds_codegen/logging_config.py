"""Logging setup for tds_codegen.

Modules obtain loggers through ``get_logger(__name__)``; the CLI calls
``configure_logging`` once to attach a rich console handler.
"""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "tds_codegen"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package root logger."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    console: Optional[Console] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Attach a RichHandler to the package root logger.

    Args:
        level: Logging level name or number
        console: Console to write to (defaults to stderr)
        force: Replace handlers installed by a previous call

    Returns:
        The configured package root logger
    """
    global _configured

    if isinstance(level, str):
        level_name = level.upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level_name}")

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    if _configured and not force:
        return root

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)

    _configured = True
    return root
