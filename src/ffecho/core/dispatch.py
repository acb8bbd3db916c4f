"""Send synthetic HTTP requests and CloudEvents to a running instance.

Remote delegation (Cloud Run) is not a separate code path: it is the same
dispatch with the target forced to https on port 443.
"""

import logging
import random
from dataclasses import dataclass
from typing import Literal

from ffecho.core.cloudevent import CloudEvent, EventEncoding, encode_event, new_event
from ffecho.core.http.abc import HttpClient, HttpResponse

logger = logging.getLogger(__name__)

REMOTE_SCHEME = "https"
REMOTE_PORT = 443


@dataclass(frozen=True)
class DispatchTarget:
    """Where to send traffic: scheme://host:port."""

    scheme: Literal["http", "https"]
    host: str
    port: int

    @property
    def url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}"

    @staticmethod
    def local(host: str, port: int, https: bool) -> "DispatchTarget":
        """Target built from the --https/--host/--port flags."""
        return DispatchTarget(scheme="https" if https else "http", host=host, port=port)

    @staticmethod
    def remote(host: str) -> "DispatchTarget":
        """Target for a deployed instance: always https on port 443."""
        return DispatchTarget(scheme=REMOTE_SCHEME, host=host, port=REMOTE_PORT)


@dataclass(frozen=True)
class DispatchResult:
    """The event that was sent together with the server's answer."""

    event: CloudEvent
    encoding: EventEncoding
    response: HttpResponse


def send_request(http: HttpClient, target: DispatchTarget) -> HttpResponse:
    """Issue a bare GET to target and return whatever came back.

    Raises:
        TransportError: If the connection fails or times out
    """
    logger.debug("Sending HTTP request to %s", target.url)
    return http.get(target.url)


def dispatch_event(
    http: HttpClient,
    encoding: str | EventEncoding,
    event_type: str,
    source: str,
    payload: str,
    target: DispatchTarget,
    rng: random.Random | None = None,
) -> DispatchResult:
    """Construct a CloudEvent and POST it to target.

    The encoding is validated before anything else happens, so an invalid
    value never reaches the network. Error responses from the server are
    returned like any other response; only transport failures raise.

    Args:
        http: HTTP transport
        encoding: "json" (structured mode) or "binary" (binary mode)
        event_type: CloudEvents type attribute
        source: CloudEvents source attribute
        payload: Event data, sent unchanged
        target: Where to send the event
        rng: Optional random generator for event ids

    Returns:
        DispatchResult with the sent event and the server response

    Raises:
        ConfigurationError: If encoding is not "json" or "binary"
        TransportError: If the connection fails or times out
    """
    resolved = EventEncoding.parse(encoding)
    event = new_event(event_type, source, payload, rng)
    encoded = encode_event(event, resolved)
    logger.debug("Sending %s event id=%s to %s", resolved.value, event.id, target.url)
    response = http.post(target.url, headers=encoded.headers, body=encoded.body)
    return DispatchResult(event=event, encoding=resolved, response=response)
