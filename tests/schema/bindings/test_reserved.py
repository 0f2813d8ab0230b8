from itertools import combinations

import pytest
from pydantic import ValidationError

from asyncapi_bindings import (
    AttachmentPoint,
    ChannelBinding,
    JMSChannelBinding,
    JMSMessageBinding,
    JMSOperationBinding,
    JMSServerBinding,
    MessageBinding,
    OperationBinding,
    RedisChannelBinding,
    RedisMessageBinding,
    RedisOperationBinding,
    RedisServerBinding,
    ServerBinding,
    SQSChannelBinding,
    SQSMessageBinding,
    SQSOperationBinding,
    SQSServerBinding,
    STOMPChannelBinding,
    STOMPMessageBinding,
    STOMPOperationBinding,
    STOMPServerBinding,
    UnknownKeyPolicy,
    WebSocketsMessageBinding,
    WebSocketsOperationBinding,
    WebSocketsServerBinding,
)
from asyncapi_bindings.exceptions import (
    BindingDecodeError,
    BindingTypeError,
    UnknownBindingError,
)
from asyncapi_bindings.schema import Binding

RESERVED = (
    JMSServerBinding,
    JMSChannelBinding,
    JMSOperationBinding,
    JMSMessageBinding,
    RedisServerBinding,
    RedisChannelBinding,
    RedisOperationBinding,
    RedisMessageBinding,
    SQSServerBinding,
    SQSChannelBinding,
    SQSOperationBinding,
    SQSMessageBinding,
    STOMPServerBinding,
    STOMPChannelBinding,
    STOMPOperationBinding,
    STOMPMessageBinding,
    WebSocketsServerBinding,
    WebSocketsOperationBinding,
    WebSocketsMessageBinding,
)


@pytest.mark.parametrize("binding_cls", RESERVED, ids=lambda c: c.__name__)
def test_reserved_binding_has_no_fields(binding_cls: type[Binding]) -> None:
    assert binding_cls.model_fields == {}
    assert binding_cls() == binding_cls()
    assert binding_cls().to_jsonable() == {}


@pytest.mark.parametrize("binding_cls", RESERVED, ids=lambda c: c.__name__)
def test_reserved_binding_decodes_empty_object(binding_cls: type[Binding]) -> None:
    assert binding_cls.from_jsonable({}) == binding_cls()
    assert binding_cls.from_jsonable(binding_cls().to_jsonable()) == binding_cls()


@pytest.mark.parametrize(
    ("first", "second"),
    [
        pytest.param(a, b, id=f"{a.__name__}-{b.__name__}")
        for a, b in combinations(RESERVED, 2)
    ],
)
def test_reserved_bindings_of_different_variants_differ(
    first: type[Binding],
    second: type[Binding],
) -> None:
    assert first().to_jsonable() == second().to_jsonable() == {}
    assert first() != second()
    assert second() != first()


@pytest.mark.parametrize(
    ("binding_cls", "base", "point", "protocol"),
    (
        pytest.param(
            JMSChannelBinding, ChannelBinding, AttachmentPoint.channel, "jms", id="jms"
        ),
        pytest.param(
            JMSOperationBinding,
            OperationBinding,
            AttachmentPoint.operation,
            "jms",
            id="jms-operation",
        ),
        pytest.param(
            RedisMessageBinding,
            MessageBinding,
            AttachmentPoint.message,
            "redis",
            id="redis",
        ),
        pytest.param(
            SQSServerBinding, ServerBinding, AttachmentPoint.server, "sqs", id="sqs"
        ),
        pytest.param(
            STOMPOperationBinding,
            OperationBinding,
            AttachmentPoint.operation,
            "stomp",
            id="stomp",
        ),
    ),
)
def test_reserved_binding_identity(
    binding_cls: type[Binding],
    base: type[Binding],
    point: AttachmentPoint,
    protocol: str,
) -> None:
    binding = binding_cls()

    assert isinstance(binding, base)
    assert binding.attachment_point is point
    assert binding.protocol == protocol


def test_reserved_binding_not_equal_to_plain_dict() -> None:
    assert JMSChannelBinding() != {}


def test_reserved_binding_repr() -> None:
    assert repr(SQSServerBinding()) == "SQSServerBinding()"


@pytest.mark.parametrize(
    "base",
    (ServerBinding, ChannelBinding, OperationBinding, MessageBinding),
)
def test_attachment_point_base_is_not_a_binding(base: type[Binding]) -> None:
    with pytest.raises(BindingTypeError):
        base()


class TestReservedUnknownKeys:
    def test_preserve_drops_fields(self) -> None:
        binding = JMSOperationBinding.from_jsonable({"destination": "queue"})

        assert binding.to_jsonable() == {}
        assert binding == JMSOperationBinding()

    def test_ignore(self) -> None:
        binding = JMSOperationBinding.from_jsonable(
            {"destination": "queue"},
            unknown=UnknownKeyPolicy.ignore,
        )

        assert binding == JMSOperationBinding()

    def test_error(self) -> None:
        with pytest.raises(UnknownBindingError) as exc_info:
            JMSOperationBinding.from_jsonable({"destination": "queue"}, unknown="error")

        assert exc_info.value.key == "destination"
        assert str(exc_info.value) == "Unknown key `destination` for JMSOperationBinding"

    def test_not_an_object(self) -> None:
        with pytest.raises(BindingDecodeError):
            RedisMessageBinding.from_jsonable(["redis"])


@pytest.mark.parametrize("binding_cls", RESERVED, ids=lambda c: c.__name__)
def test_reserved_binding_rejects_fields(binding_cls: type[Binding]) -> None:
    with pytest.raises(ValidationError):
        binding_cls(destination="queue")


def test_reserved_binding_rejects_assignment() -> None:
    binding = JMSChannelBinding()

    with pytest.raises(ValueError, match="no field"):
        binding.destination = "queue"

    assert binding == JMSChannelBinding()
    assert binding.to_jsonable() == {}
