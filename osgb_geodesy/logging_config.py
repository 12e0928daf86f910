import logging
from typing import Optional

from . import config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging for applications embedding the library.

    Falls back to ``config.LOG_LEVEL`` and then INFO when the level name is unknown.
    """
    name = (level or config.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format=LOG_FORMAT,
    )
