"""AsyncAPI SQS operation binding.

References: https://github.com/asyncapi/bindings/tree/master/sqs
"""

from typing import ClassVar

from asyncapi_bindings.schema.base import OperationBinding


class SQSOperationBinding(OperationBinding):
    """A class to represent SQS operation binding.

    This object MUST NOT contain any properties. Its name is reserved for future use.
    """

    protocol: ClassVar[str] = "sqs"
