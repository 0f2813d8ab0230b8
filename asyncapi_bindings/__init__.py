"""Typed AsyncAPI protocol bindings for servers, channels, operations and messages."""

from asyncapi_bindings.__about__ import __version__
from asyncapi_bindings._internal.configs import LoaderConfig
from asyncapi_bindings._internal.constants import (
    LATEST_BINDING_VERSION,
    AttachmentPoint,
    DocumentFormat,
    UnknownKeyPolicy,
)
from asyncapi_bindings.loader import (
    dump_bindings,
    dumps_bindings,
    get_binding_class,
    get_bindings_class,
    load_bindings,
    load_bindings_file,
    loads_bindings,
    supported_protocols,
)
from asyncapi_bindings.schema import (
    Binding,
    BindingsMapping,
    ChannelBinding,
    ChannelBindings,
    MessageBinding,
    MessageBindings,
    OperationBinding,
    OperationBindings,
    ServerBinding,
    ServerBindings,
)
from asyncapi_bindings.schema.bindings import (
    JMSChannelBinding,
    JMSMessageBinding,
    JMSOperationBinding,
    JMSServerBinding,
    RedisChannelBinding,
    RedisMessageBinding,
    RedisOperationBinding,
    RedisServerBinding,
    SQSChannelBinding,
    SQSMessageBinding,
    SQSOperationBinding,
    SQSServerBinding,
    STOMPChannelBinding,
    STOMPMessageBinding,
    STOMPOperationBinding,
    STOMPServerBinding,
    WebSocketsChannelBinding,
    WebSocketsMessageBinding,
    WebSocketsOperationBinding,
    WebSocketsServerBinding,
)
from asyncapi_bindings.validation import (
    BindingIssue,
    collect_issues,
    validate_bindings,
)

__all__ = (
    "LATEST_BINDING_VERSION",
    "AttachmentPoint",
    "Binding",
    "BindingIssue",
    "BindingsMapping",
    "ChannelBinding",
    "ChannelBindings",
    "DocumentFormat",
    "JMSChannelBinding",
    "JMSMessageBinding",
    "JMSOperationBinding",
    "JMSServerBinding",
    "LoaderConfig",
    "MessageBinding",
    "MessageBindings",
    "OperationBinding",
    "OperationBindings",
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
    "ServerBinding",
    "ServerBindings",
    "UnknownKeyPolicy",
    "WebSocketsChannelBinding",
    "WebSocketsMessageBinding",
    "WebSocketsOperationBinding",
    "WebSocketsServerBinding",
    "__version__",
    "collect_issues",
    "dump_bindings",
    "dumps_bindings",
    "get_binding_class",
    "get_bindings_class",
    "load_bindings",
    "load_bindings_file",
    "loads_bindings",
    "supported_protocols",
    "validate_bindings",
)
