"""Tests for CloudEvent construction and the two HTTP encodings."""

import json
import random

import pytest

from ffecho.core.cloudevent import (
    BINARY_CONTENT_TYPE,
    ID_UPPER_BOUND,
    SPEC_VERSION,
    STRUCTURED_CONTENT_TYPE,
    CloudEvent,
    EventEncoding,
    create_random_id,
    encode_binary,
    encode_event,
    encode_structured,
    new_event,
)
from ffecho.core.errors import ConfigurationError


def _event(data: str = "hello") -> CloudEvent:
    return CloudEvent(id="12345", source="toys", type="com.example.test", data=data)


def test_create_random_id_is_bounded_decimal_string() -> None:
    rng = random.Random(7)
    for _ in range(200):
        event_id = create_random_id(rng)
        assert event_id.isdigit()
        assert 0 <= int(event_id) < ID_UPPER_BOUND


def test_create_random_id_without_rng_uses_module_random() -> None:
    assert create_random_id().isdigit()


def test_new_event_generates_fresh_id_per_call() -> None:
    rng = random.Random(1)
    first = new_event("com.example.test", "toys", "hello", rng)
    second = new_event("com.example.test", "toys", "hello", rng)

    assert first.id != second.id
    assert first.specversion == SPEC_VERSION == "1.0"
    assert first.data == "hello"


def test_encode_structured_body_has_exactly_five_keys() -> None:
    encoded = encode_structured(_event())

    document = json.loads(encoded.body.decode("utf-8"))
    assert list(document) == ["id", "source", "type", "specversion", "data"]
    assert document == {
        "id": "12345",
        "source": "toys",
        "type": "com.example.test",
        "specversion": "1.0",
        "data": "hello",
    }
    assert encoded.headers == {"Content-Type": STRUCTURED_CONTENT_TYPE}


def test_encode_structured_is_compact_json() -> None:
    encoded = encode_structured(_event())

    assert encoded.body == (
        b'{"id":"12345","source":"toys","type":"com.example.test",'
        b'"specversion":"1.0","data":"hello"}'
    )


@pytest.mark.parametrize("payload", ["", "with \"quotes\" and \n newline", "café ☃"])
def test_encode_structured_round_trips_payload(payload: str) -> None:
    encoded = encode_structured(_event(payload))

    assert json.loads(encoded.body.decode("utf-8"))["data"] == payload


def test_encode_binary_puts_attributes_in_headers() -> None:
    encoded = encode_binary(_event())

    assert encoded.headers == {
        "Content-Type": BINARY_CONTENT_TYPE,
        "CE-ID": "12345",
        "CE-Source": "toys",
        "CE-Type": "com.example.test",
        "CE-Specversion": "1.0",
    }
    assert encoded.body == b"hello"


def test_encode_binary_leaves_payload_unmodified() -> None:
    payload = '{"not": "parsed"}  \n'

    assert encode_binary(_event(payload)).body == payload.encode("utf-8")


def test_undecodable_payload_bytes_are_sent_unchanged() -> None:
    payload = b"caf\xe9".decode("utf-8", "surrogateescape")

    assert encode_binary(_event(payload)).body == b"caf\xe9"
    assert encode_structured(_event(payload)).body.endswith(b'"data":"caf\xe9"}')


def test_encode_event_selects_mode() -> None:
    event = _event()

    assert encode_event(event, EventEncoding.JSON) == encode_structured(event)
    assert encode_event(event, EventEncoding.BINARY) == encode_binary(event)


def test_event_encoding_parse_accepts_legal_values() -> None:
    assert EventEncoding.parse("json") is EventEncoding.JSON
    assert EventEncoding.parse("binary") is EventEncoding.BINARY
    assert EventEncoding.parse(EventEncoding.BINARY) is EventEncoding.BINARY


@pytest.mark.parametrize("value", ["xml", "JSON", "", "structured"])
def test_event_encoding_parse_rejects_other_values(value: str) -> None:
    with pytest.raises(ConfigurationError, match="Invalid encoding"):
        EventEncoding.parse(value)
