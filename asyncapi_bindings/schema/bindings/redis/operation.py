"""AsyncAPI Redis operation binding.

References: https://github.com/asyncapi/bindings/tree/master/redis
"""

from typing import ClassVar

from asyncapi_bindings.schema.base import OperationBinding


class RedisOperationBinding(OperationBinding):
    """Redis operation binding, reserved for future use."""

    protocol: ClassVar[str] = "redis"
