"""AsyncAPI SQS server binding."""

from typing import ClassVar

from asyncapi_bindings.schema.base import ServerBinding


class SQSServerBinding(ServerBinding):
    """A class to represent SQS server binding.

    This object MUST NOT contain any properties. Its name is reserved for future use.
    """

    protocol: ClassVar[str] = "sqs"
