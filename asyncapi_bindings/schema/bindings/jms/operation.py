"""AsyncAPI JMS operation binding.

References: https://github.com/asyncapi/bindings/tree/master/jms
"""

from typing import ClassVar

from asyncapi_bindings.schema.base import OperationBinding


class JMSOperationBinding(OperationBinding):
    """A class to represent JMS operation binding.

    This object MUST NOT contain any properties. Its name is reserved for future use.
    """

    protocol: ClassVar[str] = "jms"
