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


class ChannelBindings(BindingsMapping):
    """A class to represent channel bindings.

    Attributes:
        jms : JMS channel binding
        redis : Redis channel binding
        sqs : SQS channel binding
        stomp : STOMP channel binding
        ws : WebSockets channel binding
    """

    attachment_point: ClassVar[AttachmentPoint] = AttachmentPoint.channel

    jms: jms_bindings.ChannelBinding | None = None
    redis: redis_bindings.ChannelBinding | None = None
    sqs: sqs_bindings.ChannelBinding | None = None
    stomp: stomp_bindings.ChannelBinding | None = None
    ws: ws_bindings.ChannelBinding | None = None
