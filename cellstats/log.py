import logging
from typing import Union


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "cellstats-stderr"


def configure_logging(level: Union[str, int] = "INFO") -> logging.Logger:
    """
    Install a single stderr handler on the package logger.

    Calling it again only updates the level.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level

    Returns:
        The "cellstats" logger
    """
    logger = logging.getLogger("cellstats")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
