"""AsyncAPI WebSockets channel binding.

References: https://github.com/asyncapi/bindings/tree/master/websockets
"""

from typing import ClassVar

from asyncapi_bindings._internal.basic_types import AnyDict
from asyncapi_bindings._internal.constants import LATEST_BINDING_VERSION
from asyncapi_bindings.schema.base import ChannelBinding


class WebSocketsChannelBinding(ChannelBinding):
    """A class to represent WebSockets channel binding.

    None of the documented constraints below are enforced here, values pass
    through as given. See `asyncapi_bindings.validation` for the checks.

    Attributes:
        method : HTTP method used to establish the connection, `GET` or `POST`
        query : schema object of type `object` with `properties`, describing
            the query parameters
        headers : schema object of type `object` with `properties`, describing
            the HTTP headers used to establish the connection
        bindingVersion : version of this binding, `"latest"` when omitted
    """

    protocol: ClassVar[str] = "ws"

    method: str | None = None
    query: AnyDict | None = None
    headers: AnyDict | None = None
    bindingVersion: str | None = None

    @property
    def effective_binding_version(self) -> str:
        if self.bindingVersion is None:
            return LATEST_BINDING_VERSION
        return self.bindingVersion
