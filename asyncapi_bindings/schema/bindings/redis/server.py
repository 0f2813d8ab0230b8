"""AsyncAPI Redis server binding.

References: https://github.com/asyncapi/bindings/tree/master/redis
"""

from typing import ClassVar

from asyncapi_bindings.schema.base import ServerBinding


class RedisServerBinding(ServerBinding):
    """Redis server binding, reserved for future use."""

    protocol: ClassVar[str] = "redis"
