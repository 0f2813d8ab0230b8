import pytest

from asyncapi_bindings._internal.logger import logger


@pytest.fixture(autouse=True)
def restore_logger():
    level, handlers = logger.level, logger.handlers[:]
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers
