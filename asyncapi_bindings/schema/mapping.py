from collections.abc import Iterator
from typing import Any, ClassVar, get_args

from pydantic import ValidationError
from typing_extensions import Self

from asyncapi_bindings._internal.basic_types import AnyDict
from asyncapi_bindings._internal.constants import AttachmentPoint, UnknownKeyPolicy
from asyncapi_bindings.exceptions import (
    BindingDecodeError,
    BindingTypeError,
    UnknownBindingError,
)

from .base import Binding, BindingModel, filter_unknown


class BindingsMapping(BindingModel):
    """Bindings of one attachment point keyed by protocol identifier.

    Every supported protocol is a declared optional field, so the set of
    variants at an attachment point is closed. Keys the model does not know
    are kept as raw values when the decoding policy preserves them.
    """

    attachment_point: ClassVar[AttachmentPoint]

    @classmethod
    def supported_protocols(cls) -> tuple[str, ...]:
        return tuple(cls.model_fields)

    @classmethod
    def binding_class(cls, protocol: str) -> type[Binding]:
        field = cls.model_fields.get(protocol)
        if field is None:
            raise UnknownBindingError(protocol, cls._owner())

        return next(arg for arg in get_args(field.annotation) if arg is not type(None))

    @classmethod
    def _owner(cls) -> str:
        return f"{cls.attachment_point.value} bindings"

    def __getitem__(self, protocol: str) -> Any:
        if protocol in type(self).model_fields:
            value = getattr(self, protocol)
        else:
            value = (self.model_extra or {}).get(protocol)

        if value is None:
            raise KeyError(protocol)

        return value

    def __setitem__(self, protocol: str, binding: Binding) -> None:
        binding_cls = self.binding_class(protocol)
        if not isinstance(binding, binding_cls):
            msg = (
                f"`{protocol}` {self.attachment_point.value} binding must be "
                f"{binding_cls.__name__}, got {type(binding).__name__}"
            )
            raise BindingTypeError(msg)

        setattr(self, protocol, binding)

    def __delitem__(self, protocol: str) -> None:
        if protocol in type(self).model_fields and getattr(self, protocol) is not None:
            setattr(self, protocol, None)

        elif self.model_extra and protocol in self.model_extra:
            del self.model_extra[protocol]

        else:
            raise KeyError(protocol)

    def __contains__(self, protocol: object) -> bool:
        return protocol in self._present_fields()

    def get(self, protocol: str, default: Any = None) -> Any:
        try:
            return self[protocol]
        except KeyError:
            return default

    def protocols(self) -> tuple[str, ...]:
        return tuple(self._present_fields())

    def items(self) -> Iterator[tuple[str, Any]]:
        yield from self._present_fields().items()

    def to_jsonable(self) -> AnyDict:
        return {
            protocol: binding.to_jsonable() if isinstance(binding, Binding) else binding
            for protocol, binding in self.items()
        }

    @classmethod
    def from_jsonable(
        cls,
        data: Any,
        *,
        unknown: UnknownKeyPolicy | str = UnknownKeyPolicy.preserve,
    ) -> Self:
        unknown = UnknownKeyPolicy(unknown)
        data = filter_unknown(
            data,
            cls.model_fields,
            unknown=unknown,
            owner=cls._owner(),
        )

        values: AnyDict = {}
        for protocol, value in data.items():
            # `{"ws": null}` declares nothing
            if value is None:
                continue

            if protocol not in cls.model_fields:
                values[protocol] = value

            else:
                values[protocol] = cls.binding_class(protocol).from_jsonable(
                    value,
                    unknown=unknown,
                )

        try:
            return cls.model_validate(values)
        except ValidationError as e:
            msg = f"Invalid {cls._owner()}: {e}"
            raise BindingDecodeError(msg) from e
