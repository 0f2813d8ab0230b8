"""AsyncAPI STOMP channel binding.

References: https://github.com/asyncapi/bindings/tree/master/stomp
"""

from typing import ClassVar

from asyncapi_bindings.schema.base import ChannelBinding


class STOMPChannelBinding(ChannelBinding):
    """A class to represent STOMP channel binding.

    This object MUST NOT contain any properties. Its name is reserved for future use.
    """

    protocol: ClassVar[str] = "stomp"
