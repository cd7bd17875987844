import logging
import os
from typing import Optional

DEBUG_VARIABLE = "THROTTLED_READER_DEBUG"
LOG_FORMAT = "[ pid=%(process)d, time=%(asctime)s ]: (%(name)s) %(message)s"

_SWITCHED_OFF = ("", "off", "0", "false", "no")


def debug_requested() -> bool:
    return os.getenv(DEBUG_VARIABLE, "off").strip().lower() not in _SWITCHED_OFF


def init_logging(level: Optional[int] = None):
    """
    Set up logging for scripts driving a poll loop.

    :param level: Overrides the level picked from THROTTLED_READER_DEBUG.
    """
    if level is None:
        level = logging.DEBUG if debug_requested() else logging.WARNING

    logging.basicConfig(level=level, format=LOG_FORMAT)
