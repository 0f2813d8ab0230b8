"""AsyncAPI protocol bindings.

References: https://github.com/asyncapi/bindings
"""

from .jms import (
    JMSChannelBinding,
    JMSMessageBinding,
    JMSOperationBinding,
    JMSServerBinding,
)
from .redis import (
    RedisChannelBinding,
    RedisMessageBinding,
    RedisOperationBinding,
    RedisServerBinding,
)
from .sqs import (
    SQSChannelBinding,
    SQSMessageBinding,
    SQSOperationBinding,
    SQSServerBinding,
)
from .stomp import (
    STOMPChannelBinding,
    STOMPMessageBinding,
    STOMPOperationBinding,
    STOMPServerBinding,
)
from .ws import (
    WebSocketsChannelBinding,
    WebSocketsMessageBinding,
    WebSocketsOperationBinding,
    WebSocketsServerBinding,
)

__all__ = (
    "JMSChannelBinding",
    "JMSMessageBinding",
    "JMSOperationBinding",
    "JMSServerBinding",
    "RedisChannelBinding",
    "RedisMessageBinding",
    "RedisOperationBinding",
    "RedisServerBinding",
    "SQSChannelBinding",
    "SQSMessageBinding",
    "SQSOperationBinding",
    "SQSServerBinding",
    "STOMPChannelBinding",
    "STOMPMessageBinding",
    "STOMPOperationBinding",
    "STOMPServerBinding",
    "WebSocketsChannelBinding",
    "WebSocketsMessageBinding",
    "WebSocketsOperationBinding",
    "WebSocketsServerBinding",
)
