"""CloudEvents v1.0 construction and HTTP encoding.

Two HTTP encodings are supported:
- Structured mode: the whole envelope is one JSON document in the body,
  sent as application/cloudevents+json.
- Binary mode: envelope attributes travel as CE-* headers and the body is
  the raw payload, untouched.

Events are built fresh for every send and are never cached or reused.
"""

import json
import random
from dataclasses import dataclass
from enum import StrEnum

from ffecho.core.errors import ConfigurationError

SPEC_VERSION = "1.0"
CE_HEADER_PREFIX = "CE-"
STRUCTURED_CONTENT_TYPE = "application/cloudevents+json; charset=utf-8"
BINARY_CONTENT_TYPE = "text/plain; charset=utf-8"

# Event ids are decimal strings below this bound
ID_UPPER_BOUND = 100_000_000


class EventEncoding(StrEnum):
    """CloudEvents HTTP content mode."""

    JSON = "json"
    BINARY = "binary"

    @classmethod
    def parse(cls, value: "str | EventEncoding") -> "EventEncoding":
        """Convert a flag value to an encoding.

        Raises:
            ConfigurationError: If value is not one of "json" or "binary"
        """
        if isinstance(value, EventEncoding):
            return value
        choices = [member.value for member in cls]
        if value not in choices:
            raise ConfigurationError(
                f"Invalid encoding {value!r}: expected one of {', '.join(choices)}"
            )
        return cls(value)


@dataclass(frozen=True)
class CloudEvent:
    """A single CloudEvents envelope.

    Attributes:
        id: Opaque identifier, fresh per send (uniqueness not guaranteed)
        source: URI-like event source (e.g., "toys")
        type: Reverse-DNS event type (e.g., "com.example.test")
        data: Opaque string payload
        specversion: Always "1.0"
    """

    id: str
    source: str
    type: str
    data: str
    specversion: str = SPEC_VERSION


@dataclass(frozen=True)
class EncodedEvent:
    """HTTP rendition of a CloudEvent: headers plus raw body."""

    headers: dict[str, str]
    body: bytes


def create_random_id(rng: random.Random | None = None) -> str:
    """Generate a pseudo-random event id.

    Collisions are possible and acceptable: this feeds a test-traffic
    generator, not a system that relies on unique ids.
    """
    generator = rng if rng is not None else random
    return str(generator.randrange(ID_UPPER_BOUND))


def new_event(
    event_type: str,
    source: str,
    payload: str,
    rng: random.Random | None = None,
) -> CloudEvent:
    """Build a fresh CloudEvent with a newly generated id."""
    return CloudEvent(
        id=create_random_id(rng),
        source=source,
        type=event_type,
        data=payload,
    )


def encode_structured(event: CloudEvent) -> EncodedEvent:
    """Encode event as a structured-mode JSON document.

    The body holds exactly the keys id, source, type, specversion, data,
    serialized compactly in that order.
    """
    document = {
        "id": event.id,
        "source": event.source,
        "type": event.type,
        "specversion": event.specversion,
        "data": event.data,
    }
    body = json.dumps(document, separators=(",", ":"), ensure_ascii=False)
    return EncodedEvent(
        headers={"Content-Type": STRUCTURED_CONTENT_TYPE},
        body=body.encode("utf-8", "surrogateescape"),
    )


def encode_binary(event: CloudEvent) -> EncodedEvent:
    """Encode event in binary mode: attributes as CE-* headers, raw payload body.

    Payload characters that came from undecodable argv bytes are sent as the
    original bytes.
    """
    return EncodedEvent(
        headers={
            "Content-Type": BINARY_CONTENT_TYPE,
            f"{CE_HEADER_PREFIX}ID": event.id,
            f"{CE_HEADER_PREFIX}Source": event.source,
            f"{CE_HEADER_PREFIX}Type": event.type,
            f"{CE_HEADER_PREFIX}Specversion": event.specversion,
        },
        body=event.data.encode("utf-8", "surrogateescape"),
    )


def encode_event(event: CloudEvent, encoding: EventEncoding) -> EncodedEvent:
    """Encode event using the requested content mode."""
    if encoding is EventEncoding.JSON:
        return encode_structured(event)
    return encode_binary(event)
