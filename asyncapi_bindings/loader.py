"""Loading and dumping of serialized bindings objects."""

import json
from pathlib import Path
from typing import Any

import yaml

from asyncapi_bindings._internal.basic_types import AnyDict
from asyncapi_bindings._internal.configs import LoaderConfig
from asyncapi_bindings._internal.constants import (
    AttachmentPoint,
    DocumentFormat,
    UnknownKeyPolicy,
)
from asyncapi_bindings._internal.logger import logger
from asyncapi_bindings.exceptions import BindingDecodeError
from asyncapi_bindings.schema import (
    Binding,
    BindingsMapping,
    ChannelBindings,
    MessageBindings,
    OperationBindings,
    ServerBindings,
)

BINDINGS_BY_POINT: dict[AttachmentPoint, type[BindingsMapping]] = {
    AttachmentPoint.server: ServerBindings,
    AttachmentPoint.channel: ChannelBindings,
    AttachmentPoint.operation: OperationBindings,
    AttachmentPoint.message: MessageBindings,
}


def get_bindings_class(point: AttachmentPoint | str) -> type[BindingsMapping]:
    return BINDINGS_BY_POINT[AttachmentPoint(point)]


def get_binding_class(point: AttachmentPoint | str, protocol: str) -> type[Binding]:
    """Get the binding variant declared for a protocol at an attachment point.

    Raises:
        UnknownBindingError: the protocol is not supported at this point.
    """
    return get_bindings_class(point).binding_class(protocol)


def supported_protocols(point: AttachmentPoint | str) -> tuple[str, ...]:
    return get_bindings_class(point).supported_protocols()


def load_bindings(
    point: AttachmentPoint | str,
    data: Any,
    *,
    unknown: UnknownKeyPolicy | str = UnknownKeyPolicy.preserve,
) -> BindingsMapping:
    """Decode a jsonable bindings object declared at `point`.

    Args:
        point: attachment point the object belongs to
        data: decoded JSON/YAML object keyed by protocol identifier
        unknown: policy for keys the model does not declare

    Returns:
        The bindings mapping of the attachment point.

    Raises:
        BindingDecodeError: the object is malformed.
        UnknownBindingError: an unknown key was met with the `error` policy.
    """
    bindings_cls = get_bindings_class(point)
    bindings = bindings_cls.from_jsonable(data, unknown=unknown)
    logger.debug(
        "Loaded %s bindings: %s",
        bindings_cls.attachment_point.value,
        ", ".join(bindings.protocols()) or "<empty>",
    )
    return bindings


def dump_bindings(bindings: BindingsMapping | Binding) -> AnyDict:
    """Encode bindings to a sparse jsonable object, absent fields are omitted."""
    return bindings.to_jsonable()


def loads_bindings(
    point: AttachmentPoint | str,
    text: str | bytes,
    *,
    config: LoaderConfig | None = None,
) -> BindingsMapping:
    config = config or LoaderConfig()

    try:
        if config.format is DocumentFormat.yaml:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)

    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        msg = f"Can't parse {config.format.value} bindings: {e}"
        raise BindingDecodeError(msg) from e

    return load_bindings(point, data, unknown=config.unknown)


def dumps_bindings(
    bindings: BindingsMapping | Binding,
    *,
    config: LoaderConfig | None = None,
    indent: int = 2,
) -> str:
    config = config or LoaderConfig()
    data = dump_bindings(bindings)

    if config.format is DocumentFormat.yaml:
        return yaml.safe_dump(data, indent=indent, sort_keys=False)

    return json.dumps(data, indent=indent)


def load_bindings_file(
    point: AttachmentPoint | str,
    path: Path,
    *,
    config: LoaderConfig | None = None,
) -> BindingsMapping:
    """Load bindings from a JSON or YAML file, the format follows the suffix."""
    path = Path(path)
    config = config or LoaderConfig.for_path(path)

    logger.debug("Reading %s bindings from %s", AttachmentPoint(point).value, path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        msg = f"Can't read {path}: {e}"
        raise BindingDecodeError(msg) from e

    return loads_bindings(point, text, config=config)
