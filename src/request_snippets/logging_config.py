"""Logger access for request-snippets modules."""

import logging

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_ROOT = "request_snippets"


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace."""
    if not name.startswith(_ROOT):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Send package logs to the current stderr, replacing any earlier handler."""
    logger = logging.getLogger(_ROOT)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
