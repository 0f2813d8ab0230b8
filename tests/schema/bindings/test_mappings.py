import pytest

from asyncapi_bindings import (
    AttachmentPoint,
    ChannelBindings,
    JMSChannelBinding,
    JMSOperationBinding,
    MessageBindings,
    OperationBindings,
    RedisMessageBinding,
    ServerBindings,
    SQSServerBinding,
    STOMPOperationBinding,
    WebSocketsChannelBinding,
)
from asyncapi_bindings.exceptions import BindingTypeError, UnknownBindingError
from asyncapi_bindings.schema import BindingsMapping


@pytest.mark.parametrize(
    ("bindings_cls", "point"),
    (
        (ServerBindings, AttachmentPoint.server),
        (ChannelBindings, AttachmentPoint.channel),
        (OperationBindings, AttachmentPoint.operation),
        (MessageBindings, AttachmentPoint.message),
    ),
)
def test_every_protocol_at_every_point(
    bindings_cls: type[BindingsMapping],
    point: AttachmentPoint,
) -> None:
    assert bindings_cls.attachment_point is point
    assert bindings_cls.supported_protocols() == ("jms", "redis", "sqs", "stomp", "ws")

    for protocol in bindings_cls.supported_protocols():
        binding_cls = bindings_cls.binding_class(protocol)

        assert binding_cls.protocol == protocol
        assert binding_cls.attachment_point is point


def test_binding_class() -> None:
    assert ChannelBindings.binding_class("ws") is WebSocketsChannelBinding
    assert ChannelBindings.binding_class("jms") is JMSChannelBinding
    assert OperationBindings.binding_class("stomp") is STOMPOperationBinding
    assert MessageBindings.binding_class("redis") is RedisMessageBinding
    assert ServerBindings.binding_class("sqs") is SQSServerBinding


def test_binding_class_unknown_protocol() -> None:
    with pytest.raises(UnknownBindingError, match="kafka"):
        ChannelBindings.binding_class("kafka")


def test_empty() -> None:
    bindings = ChannelBindings()

    assert bindings.protocols() == ()
    assert "ws" not in bindings
    assert bindings.to_jsonable() == {}


def test_getitem() -> None:
    binding = WebSocketsChannelBinding(method="GET")
    bindings = ChannelBindings(ws=binding)

    assert bindings["ws"] is binding
    assert bindings.ws is binding
    assert "ws" in bindings

    with pytest.raises(KeyError):
        bindings["jms"]

    with pytest.raises(KeyError):
        bindings["kafka"]


def test_get() -> None:
    bindings = OperationBindings(jms=JMSOperationBinding())

    assert bindings.get("jms") == JMSOperationBinding()
    assert bindings.get("stomp") is None
    assert bindings.get("kafka", "default") == "default"


def test_setitem_replaces_protocol_value() -> None:
    bindings = ChannelBindings()

    bindings["ws"] = WebSocketsChannelBinding(method="GET")
    bindings["ws"] = WebSocketsChannelBinding(method="POST")

    assert bindings.protocols() == ("ws",)
    assert bindings["ws"] == WebSocketsChannelBinding(method="POST")
    assert bindings.to_jsonable() == {"ws": {"method": "POST"}}


def test_setitem_unknown_protocol() -> None:
    bindings = ChannelBindings()

    with pytest.raises(UnknownBindingError):
        bindings["kafka"] = JMSChannelBinding()


def test_setitem_wrong_variant() -> None:
    bindings = ChannelBindings()

    with pytest.raises(BindingTypeError):
        bindings["ws"] = JMSChannelBinding()

    with pytest.raises(BindingTypeError):
        bindings["jms"] = JMSOperationBinding()

    assert bindings.protocols() == ()


def test_delitem() -> None:
    bindings = ChannelBindings(jms=JMSChannelBinding(), ws=WebSocketsChannelBinding())

    del bindings["jms"]

    assert bindings.protocols() == ("ws",)

    with pytest.raises(KeyError):
        del bindings["jms"]


def test_items() -> None:
    bindings = ChannelBindings(ws=WebSocketsChannelBinding(), jms=JMSChannelBinding())

    assert list(bindings.items()) == [
        ("jms", JMSChannelBinding()),
        ("ws", WebSocketsChannelBinding()),
    ]


def test_equality_ignores_insertion_order() -> None:
    first = ChannelBindings()
    first["ws"] = WebSocketsChannelBinding(method="GET")
    first["jms"] = JMSChannelBinding()

    second = ChannelBindings()
    second["jms"] = JMSChannelBinding()
    second["ws"] = WebSocketsChannelBinding(method="GET")

    assert first == second


def test_equality_is_structural() -> None:
    assert ChannelBindings(ws=WebSocketsChannelBinding(method="GET")) != ChannelBindings(
        ws=WebSocketsChannelBinding(method="POST")
    )
    assert ChannelBindings() != OperationBindings()
    assert ChannelBindings() == ChannelBindings()


def test_to_jsonable() -> None:
    bindings = ChannelBindings(
        jms=JMSChannelBinding(),
        ws=WebSocketsChannelBinding(method="GET", bindingVersion="0.1.0"),
    )

    assert bindings.to_jsonable() == {
        "jms": {},
        "ws": {"method": "GET", "bindingVersion": "0.1.0"},
    }
