"""AsyncAPI Redis message binding.

References: https://github.com/asyncapi/bindings/tree/master/redis
"""

from typing import ClassVar

from asyncapi_bindings.schema.base import MessageBinding


class RedisMessageBinding(MessageBinding):
    """A class to represent Redis message binding.

    This object MUST NOT contain any properties. Its name is reserved for future use.
    """

    protocol: ClassVar[str] = "redis"
