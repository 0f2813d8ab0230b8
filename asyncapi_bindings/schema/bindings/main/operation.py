from typing import ClassVar

from asyncapi_bindings._internal.constants import AttachmentPoint
from asyncapi_bindings.schema.bindings import (
    jms as jms_bindings,
    redis as redis_bindings,
    sqs as sqs_bindings,
    stomp as stomp_bindings,
    ws as ws_bindings,
)
from asyncapi_bindings.schema.mapping import BindingsMapping


class OperationBindings(BindingsMapping):
    """A class to represent operation bindings.

    Attributes:
        jms : JMS operation binding
        redis : Redis operation binding
        sqs : SQS operation binding
        stomp : STOMP operation binding
        ws : WebSockets operation binding
    """

    attachment_point: ClassVar[AttachmentPoint] = AttachmentPoint.operation

    jms: jms_bindings.OperationBinding | None = None
    redis: redis_bindings.OperationBinding | None = None
    sqs: sqs_bindings.OperationBinding | None = None
    stomp: stomp_bindings.OperationBinding | None = None
    ws: ws_bindings.OperationBinding | None = None
