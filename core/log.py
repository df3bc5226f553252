# core/log.py
import logging
import os
from typing import Optional, Union

from core.settings import LOG_FORMAT, LOG_LEVEL, LOG_LEVEL_ENV


def setup_logging(level: Optional[Union[str, int]] = None) -> None:
    """
    Configure the root logger for the game entry point.
    Precedence: explicit level > $TD_LOG_LEVEL > settings.LOG_LEVEL
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, LOG_LEVEL)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
