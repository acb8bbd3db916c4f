"""HTTP transport interface used by the request and event dispatchers.

The transport never interprets response bodies and never raises on HTTP
status: a 500 from the server is returned exactly like a 200. Only
connection-level failures raise, as TransportError.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class HttpResponse:
    """Status and decoded body of one HTTP exchange."""

    status_code: int
    body: str


class HttpClient(ABC):
    """Abstract interface for outbound HTTP calls.

    Real implementation uses httpx. Fake implementations record requests in
    memory for unit tests without any network access.
    """

    @abstractmethod
    def get(self, url: str) -> HttpResponse:
        """Send a bare GET request.

        Args:
            url: Absolute URL (scheme://host:port)

        Returns:
            Whatever the server answered, including error statuses

        Raises:
            TransportError: If the connection fails or times out
            ConfigurationError: If the URL cannot be parsed
        """
        ...

    @abstractmethod
    def post(self, url: str, headers: dict[str, str], body: bytes) -> HttpResponse:
        """Send a POST request with the given headers and raw body.

        Args:
            url: Absolute URL (scheme://host:port)
            headers: Request headers, sent as given
            body: Raw request body

        Returns:
            Whatever the server answered, including error statuses

        Raises:
            TransportError: If the connection fails or times out
            ConfigurationError: If the URL cannot be parsed
        """
        ...
