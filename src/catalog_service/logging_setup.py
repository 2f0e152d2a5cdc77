"""Logging configuration.

One call at startup configures the root logger; every module logs through
``logging.getLogger(__name__)``.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger for the service.

    Safe to call more than once (e.g. one app per test); the handler is
    only installed the first time, later calls just update the level.

    Args:
        level: Standard logging level name
    """
    global _handler
    root = logging.getLogger()
    if _handler is None or _handler not in root.handlers:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)
    root.setLevel(level)
