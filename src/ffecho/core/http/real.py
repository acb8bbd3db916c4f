"""Real HTTP transport backed by httpx."""

import logging

import httpx

from ffecho.core.errors import ConfigurationError, TransportError
from ffecho.core.http.abc import HttpClient, HttpResponse

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


class RealHttpClient(HttpClient):
    """Production implementation using a short-lived httpx.Client per call.

    Args:
        timeout: Request timeout in seconds
        transport: Optional httpx transport (tests pass httpx.MockTransport)
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    def get(self, url: str) -> HttpResponse:
        return self._send("GET", url, headers={}, body=None)

    def post(self, url: str, headers: dict[str, str], body: bytes) -> HttpResponse:
        return self._send("POST", url, headers=headers, body=body)

    def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None,
    ) -> HttpResponse:
        logger.debug("%s %s headers=%s", method, url, headers)
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.request(method, url, headers=headers, content=body)
        except httpx.InvalidURL as exc:
            raise ConfigurationError(f"Invalid URL {url}: {exc}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc
        logger.debug("Response status=%d", response.status_code)
        return HttpResponse(status_code=response.status_code, body=response.text)
