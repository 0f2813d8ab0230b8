import logging

logger = logging.getLogger("asyncapi_bindings")
logger.addHandler(logging.NullHandler())
