from .channel import WebSocketsChannelBinding, WebSocketsChannelBinding as ChannelBinding
from .message import WebSocketsMessageBinding, WebSocketsMessageBinding as MessageBinding
from .operation import WebSocketsOperationBinding, WebSocketsOperationBinding as OperationBinding
from .server import WebSocketsServerBinding, WebSocketsServerBinding as ServerBinding

__all__ = (
    "ChannelBinding",
    "WebSocketsChannelBinding",
    "WebSocketsMessageBinding",
    "WebSocketsOperationBinding",
    "WebSocketsServerBinding",
    "MessageBinding",
    "OperationBinding",
    "ServerBinding",
)
