"""AsyncAPI JMS server binding.

References: https://github.com/asyncapi/bindings/tree/master/jms
"""

from typing import ClassVar

from asyncapi_bindings.schema.base import ServerBinding


class JMSServerBinding(ServerBinding):
    """A class to represent JMS server binding.

    This object MUST NOT contain any properties. Its name is reserved for future use.
    """

    protocol: ClassVar[str] = "jms"
