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


class MessageBindings(BindingsMapping):
    """A class to represent message bindings.

    Attributes:
        jms : JMS message binding
        redis : Redis message binding
        sqs : SQS message binding
        stomp : STOMP message binding
        ws : WebSockets message binding
    """

    attachment_point: ClassVar[AttachmentPoint] = AttachmentPoint.message

    jms: jms_bindings.MessageBinding | None = None
    redis: redis_bindings.MessageBinding | None = None
    sqs: sqs_bindings.MessageBinding | None = None
    stomp: stomp_bindings.MessageBinding | None = None
    ws: ws_bindings.MessageBinding | None = None
