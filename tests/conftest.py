import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("request_snippets")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
