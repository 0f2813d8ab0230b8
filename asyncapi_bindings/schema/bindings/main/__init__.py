from .channel import ChannelBindings
from .message import MessageBindings
from .operation import OperationBindings
from .server import ServerBindings

__all__ = (
    "ChannelBindings",
    "MessageBindings",
    "OperationBindings",
    "ServerBindings",
)
