"""AsyncAPI SQS channel binding.

References: https://github.com/asyncapi/bindings/tree/master/sqs
"""

from typing import ClassVar

from asyncapi_bindings.schema.base import ChannelBinding


class SQSChannelBinding(ChannelBinding):
    """A class to represent SQS channel binding.

    This object MUST NOT contain any properties. Its name is reserved for future use.
    """

    protocol: ClassVar[str] = "sqs"
