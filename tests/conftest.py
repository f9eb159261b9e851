import logging

import pytest

from diophant_pkg import logging_config


@pytest.fixture(autouse=True)
def _reset_diophant_logging():
    yield
    logger = logging.getLogger(logging_config.ROOT_LOGGER_NAME)
    for handler in logging_config._handlers:
        logger.removeHandler(handler)
        handler.close()
    logging_config._handlers.clear()
