"""AsyncAPI STOMP operation binding.

References: https://github.com/asyncapi/bindings/tree/master/stomp
"""

from typing import ClassVar

from asyncapi_bindings.schema.base import OperationBinding


class STOMPOperationBinding(OperationBinding):
    """A class to represent STOMP operation binding.

    This object MUST NOT contain any properties. Its name is reserved for future use.
    """

    protocol: ClassVar[str] = "stomp"
