"""Logging setup for the calculator package.

Console output goes through rich's logging handler.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.logging import RichHandler

if TYPE_CHECKING:
    from calculator.config import CalculatorConfig

ROOT_LOGGER = "calculator"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the calculator namespace."""
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(config: CalculatorConfig | None = None) -> logging.Logger:
    """Attach a rich console handler to the package logger.

    Calling this again replaces the previously installed handler.

    Args:
        config: Logging settings. Defaults to CalculatorConfig().

    Returns:
        The configured package logger.
    """
    from calculator.config import CalculatorConfig

    config = config or CalculatorConfig()
    logger = logging.getLogger(ROOT_LOGGER)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(rich_tracebacks=config.rich_tracebacks, show_path=False)
    logger.addHandler(handler)
    logger.setLevel(config.log_level)
    return logger
