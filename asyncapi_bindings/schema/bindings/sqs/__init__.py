from .channel import SQSChannelBinding, SQSChannelBinding as ChannelBinding
from .message import SQSMessageBinding, SQSMessageBinding as MessageBinding
from .operation import SQSOperationBinding, SQSOperationBinding as OperationBinding
from .server import SQSServerBinding, SQSServerBinding as ServerBinding

__all__ = (
    "ChannelBinding",
    "SQSChannelBinding",
    "SQSMessageBinding",
    "SQSOperationBinding",
    "SQSServerBinding",
    "MessageBinding",
    "OperationBinding",
    "ServerBinding",
)
