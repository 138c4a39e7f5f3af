"""
Logging setup for scripts that use csvtable.

The library itself only creates loggers under the "csvtable" namespace and
never touches the root logger. Call `configure_logging()` from a script to
see load/save activity on stderr.
"""

import logging

from csvtable.config.settings import get_settings


LOGGER_NAME = "csvtable"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """
    Attach a stderr handler to the "csvtable" logger.

    Calling it again only updates the level; it never stacks handlers.

    Args:
        level: Level name or number. Defaults to the CSVTABLE_LOG_LEVEL setting.

    Returns:
        The "csvtable" logger.
    """
    if level is None:
        level = get_settings().log_level_number
    elif isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not any(getattr(h, "_csvtable_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._csvtable_handler = True
        logger.addHandler(handler)

    return logger
