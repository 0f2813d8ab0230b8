from .channel import RedisChannelBinding, RedisChannelBinding as ChannelBinding
from .message import RedisMessageBinding, RedisMessageBinding as MessageBinding
from .operation import RedisOperationBinding, RedisOperationBinding as OperationBinding
from .server import RedisServerBinding, RedisServerBinding as ServerBinding

__all__ = (
    "ChannelBinding",
    "RedisChannelBinding",
    "RedisMessageBinding",
    "RedisOperationBinding",
    "RedisServerBinding",
    "MessageBinding",
    "OperationBinding",
    "ServerBinding",
)
