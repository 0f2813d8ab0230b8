"""AsyncAPI Redis channel binding.

References: https://github.com/asyncapi/bindings/tree/master/redis
"""

from typing import ClassVar

from asyncapi_bindings.schema.base import ChannelBinding


class RedisChannelBinding(ChannelBinding):
    """Redis channel binding, reserved for future use."""

    protocol: ClassVar[str] = "redis"
