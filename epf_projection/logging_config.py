"""Logging setup shared by the app factory and the dev server."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LOGGING_CONFIGURED = False


def configure_logging(level: str = "INFO", force: bool = False) -> Optional[logging.Handler]:
    """
    Attach a console handler to the ``epf_projection`` logger.

    Repeated calls only adjust the level unless ``force`` is set, so building
    several apps in one process (tests) does not duplicate output.
    """
    global _LOGGING_CONFIGURED

    root = logging.getLogger("epf_projection")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if _LOGGING_CONFIGURED and not force:
        return None

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)

    _LOGGING_CONFIGURED = True
    return handler
