"""Attachment point base types of AsyncAPI bindings.

Every protocol binding subclasses exactly one of `ServerBinding`,
`ChannelBinding`, `OperationBinding` or `MessageBinding`. The bases declare
no fields, only the shared equality, encoding and decoding behaviour.
"""

from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ValidationError
from typing_extensions import Self

from asyncapi_bindings._internal.basic_types import AnyDict
from asyncapi_bindings._internal.constants import AttachmentPoint, UnknownKeyPolicy
from asyncapi_bindings._internal.logger import logger
from asyncapi_bindings.exceptions import (
    BindingDecodeError,
    BindingTypeError,
    UnknownBindingError,
)


class BindingModel(BaseModel):
    """Common root of bindings and bindings mappings.

    Equality is structural: both sides are of the same class, every declared
    field is equal and preserved unknown keys are equal.
    """

    model_config = {"extra": "allow", "validate_assignment": True}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BindingModel):
            return NotImplemented

        if type(self) is not type(other):
            return False

        return all(
            getattr(self, name) == getattr(other, name)
            for name in type(self).model_fields
        ) and self._extras() == other._extras()

    def _extras(self) -> AnyDict:
        # a `None` extra declares nothing
        return {
            key: value
            for key, value in (self.model_extra or {}).items()
            if value is not None
        }

    def _present_fields(self) -> AnyDict:
        values = {
            name: value
            for name in type(self).model_fields
            if (value := getattr(self, name)) is not None
        }
        values.update(self._extras())
        return values


def filter_unknown(
    data: Any,
    known: Iterable[str],
    *,
    unknown: UnknownKeyPolicy,
    owner: str,
) -> AnyDict:
    """Apply the unknown keys policy to a serialized object."""
    if not isinstance(data, Mapping):
        msg = f"{owner} expects an object, got `{type(data).__name__}`"
        raise BindingDecodeError(msg)

    known = set(known)
    result: AnyDict = {}
    for key, value in data.items():
        if not isinstance(key, str):
            msg = f"{owner} keys must be strings, got {key!r}"
            raise BindingDecodeError(msg)

        if key in known or unknown is UnknownKeyPolicy.preserve:
            result[key] = value

        elif unknown is UnknownKeyPolicy.error:
            raise UnknownBindingError(key, owner)

        else:
            logger.warning("Ignoring unknown key `%s` for %s", key, owner)

    return result


class Binding(BindingModel):
    """A protocol specific binding at one attachment point.

    Bindings declare a fixed set of fields and never carry unknown keys, so
    the `preserve` decoding policy drops them like `ignore` does.
    """

    model_config = {"extra": "forbid", "validate_assignment": True}

    attachment_point: ClassVar[AttachmentPoint]
    protocol: ClassVar[str | None] = None

    def model_post_init(self, context: Any, /) -> None:
        if type(self).protocol is None:
            msg = (
                f"{type(self).__name__} is an attachment point base, "
                "instantiate a protocol binding instead"
            )
            raise BindingTypeError(msg)

    def to_jsonable(self) -> AnyDict:
        """Encode the binding, omitting absent fields."""
        return self._present_fields()

    @classmethod
    def from_jsonable(
        cls,
        data: Any,
        *,
        unknown: UnknownKeyPolicy | str = UnknownKeyPolicy.preserve,
    ) -> Self:
        unknown = UnknownKeyPolicy(unknown)
        if unknown is UnknownKeyPolicy.preserve:
            unknown = UnknownKeyPolicy.ignore

        data = filter_unknown(
            data,
            cls.model_fields,
            unknown=unknown,
            owner=cls.__name__,
        )
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            msg = f"Invalid {cls.__name__}: {e}"
            raise BindingDecodeError(msg) from e

    def evolve(self, **changes: Any) -> Self:
        """Return a copy with the given fields replaced."""
        if unexpected := set(changes).difference(type(self).model_fields):
            msg = f"{type(self).__name__} has no fields: {', '.join(sorted(unexpected))}"
            raise BindingTypeError(msg)

        values = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(changes)
        return type(self).model_validate(values)


class ServerBinding(Binding):
    attachment_point: ClassVar[AttachmentPoint] = AttachmentPoint.server


class ChannelBinding(Binding):
    attachment_point: ClassVar[AttachmentPoint] = AttachmentPoint.channel


class OperationBinding(Binding):
    attachment_point: ClassVar[AttachmentPoint] = AttachmentPoint.operation


class MessageBinding(Binding):
    attachment_point: ClassVar[AttachmentPoint] = AttachmentPoint.message
