"""Pydantic models for JSON output schemas.

These models define the --json output of the request and event commands.
"""

from pydantic import BaseModel, ConfigDict, Field


class RequestCommandResponse(BaseModel):
    """JSON response schema for `ffecho request`.

    Attributes:
        url: URL the request was sent to
        status_code: HTTP status returned by the server
        body: Response body, uninterpreted
    """

    model_config = ConfigDict(strict=True)

    url: str
    status_code: int = Field(..., ge=100, le=599)
    body: str


class EventCommandResponse(RequestCommandResponse):
    """JSON response schema for `ffecho event`.

    Attributes:
        event_id: The CloudEvents id that was generated for this send
        encoding: "json" or "binary"
    """

    event_id: str
    encoding: str = Field(..., pattern="^(json|binary)$")
