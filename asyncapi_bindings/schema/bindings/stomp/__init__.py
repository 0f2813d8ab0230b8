from .channel import STOMPChannelBinding, STOMPChannelBinding as ChannelBinding
from .message import STOMPMessageBinding, STOMPMessageBinding as MessageBinding
from .operation import STOMPOperationBinding, STOMPOperationBinding as OperationBinding
from .server import STOMPServerBinding, STOMPServerBinding as ServerBinding

__all__ = (
    "ChannelBinding",
    "STOMPChannelBinding",
    "STOMPMessageBinding",
    "STOMPOperationBinding",
    "STOMPServerBinding",
    "MessageBinding",
    "OperationBinding",
    "ServerBinding",
)
