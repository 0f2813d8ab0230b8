from .base import (
    Binding,
    ChannelBinding,
    MessageBinding,
    OperationBinding,
    ServerBinding,
)
from .bindings.main import (
    ChannelBindings,
    MessageBindings,
    OperationBindings,
    ServerBindings,
)
from .mapping import BindingsMapping

__all__ = (
    "Binding",
    "BindingsMapping",
    "ChannelBinding",
    "ChannelBindings",
    "MessageBinding",
    "MessageBindings",
    "OperationBinding",
    "OperationBindings",
    "ServerBinding",
    "ServerBindings",
)
