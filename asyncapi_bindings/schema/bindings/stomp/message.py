"""AsyncAPI STOMP message binding.

References: https://github.com/asyncapi/bindings/tree/master/stomp
"""

from typing import ClassVar

from asyncapi_bindings.schema.base import MessageBinding


class STOMPMessageBinding(MessageBinding):
    """A class to represent STOMP message binding.

    This object MUST NOT contain any properties. Its name is reserved for future use.
    """

    protocol: ClassVar[str] = "stomp"
