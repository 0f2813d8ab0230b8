"""AsyncAPI WebSockets message binding.

References: https://github.com/asyncapi/bindings/tree/master/websockets
"""

from typing import ClassVar

from asyncapi_bindings.schema.base import MessageBinding


class WebSocketsMessageBinding(MessageBinding):
    """WebSockets message binding.

    Reserved for future use, the WebSockets bindings only describe channels.
    """

    protocol: ClassVar[str] = "ws"
