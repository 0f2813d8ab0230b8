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


class ServerBindings(BindingsMapping):
    """A class to represent server bindings.

    Attributes:
        jms : JMS server binding
        redis : Redis server binding
        sqs : SQS server binding
        stomp : STOMP server binding
        ws : WebSockets server binding
    """

    attachment_point: ClassVar[AttachmentPoint] = AttachmentPoint.server

    jms: jms_bindings.ServerBinding | None = None
    redis: redis_bindings.ServerBinding | None = None
    sqs: sqs_bindings.ServerBinding | None = None
    stomp: stomp_bindings.ServerBinding | None = None
    ws: ws_bindings.ServerBinding | None = None
