"""Package-wide logger.

unitsafe never configures handlers itself; applications opt in with
``logging.basicConfig`` or by calling ``enable_console_logging``.
"""

import logging

__all__ = ["logger", "enable_console_logging"]

logger = logging.getLogger("unitsafe")
logger.addHandler(logging.NullHandler())


def enable_console_logging(level: int = logging.DEBUG) -> logging.Handler:
    """Attach a stderr handler to the unitsafe logger and return it."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
