"""Structured logging setup for the service."""

import logging
from typing import Union

from pythonjsonlogger import jsonlogger


def setup_logger(level: Union[int, str] = logging.INFO) -> None:
    """Send JSON-formatted records from every logger to stderr."""
    if isinstance(level, str) and level.isdigit():
        level = int(level)
    logger = logging.getLogger()
    logger.setLevel(level)
    if any(getattr(handler, '_useraccounts', False)
           for handler in logger.handlers):
        return      # Already installed by an earlier app instance.
    logHandler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        '%(asctime)s %(levelname)s %(name)s %(message)s',
        rename_fields={'levelname': 'level', 'asctime': 'timestamp'}
    )
    logHandler.setFormatter(formatter)
    logHandler._useraccounts = True  # type: ignore
    logger.addHandler(logHandler)
