from enum import Enum
from pathlib import Path

LATEST_BINDING_VERSION = "latest"


class AttachmentPoint(str, Enum):
    """Places of an AsyncAPI document where bindings may be declared."""

    server = "server"
    channel = "channel"
    operation = "operation"
    message = "message"


class UnknownKeyPolicy(str, Enum):
    """How decoding treats keys the binding model does not declare.

    Attributes:
        preserve : keep the raw value and emit it back on encode
        ignore : drop the key and log a warning
        error : raise `UnknownBindingError`
    """

    preserve = "preserve"
    ignore = "ignore"
    error = "error"


class DocumentFormat(str, Enum):
    """Supported text formats of a serialized bindings object."""

    json = "json"
    yaml = "yaml"

    @classmethod
    def from_path(cls, path: Path) -> "DocumentFormat":
        if path.suffix.lower() in {".yaml", ".yml"}:
            return cls.yaml
        return cls.json
