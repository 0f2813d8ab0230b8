"""AsyncAPI JMS message binding.

References: https://github.com/asyncapi/bindings/tree/master/jms
"""

from typing import ClassVar

from asyncapi_bindings.schema.base import MessageBinding


class JMSMessageBinding(MessageBinding):
    """A class to represent JMS message binding.

    This object MUST NOT contain any properties. Its name is reserved for future use.
    """

    protocol: ClassVar[str] = "jms"
