from .channel import JMSChannelBinding, JMSChannelBinding as ChannelBinding
from .message import JMSMessageBinding, JMSMessageBinding as MessageBinding
from .operation import JMSOperationBinding, JMSOperationBinding as OperationBinding
from .server import JMSServerBinding, JMSServerBinding as ServerBinding

__all__ = (
    "ChannelBinding",
    "JMSChannelBinding",
    "JMSMessageBinding",
    "JMSOperationBinding",
    "JMSServerBinding",
    "MessageBinding",
    "OperationBinding",
    "ServerBinding",
)
