"""AsyncAPI WebSockets server binding.

References: https://github.com/asyncapi/bindings/tree/master/websockets
"""

from typing import ClassVar

from asyncapi_bindings.schema.base import ServerBinding


class WebSocketsServerBinding(ServerBinding):
    """WebSockets server binding.

    Reserved for future use, the WebSockets bindings only describe channels.
    """

    protocol: ClassVar[str] = "ws"
