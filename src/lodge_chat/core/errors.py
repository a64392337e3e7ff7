"""Domain exceptions raised by the service layer.

Each exception carries the HTTP status it maps to. The application installs
handlers that render them as ``{"error": "<code>", "message": "<text>"}``.
"""

from __future__ import annotations

from fastapi import status


class LodgeChatError(RuntimeError):
    """Base exception for all Lodge Chat failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_body(self) -> dict[str, str]:
        """Return the wire representation of this error."""
        return {"error": str(self.status_code), "message": self.message}


class ValidationFailed(LodgeChatError):
    """A required field is missing, too long, or otherwise unacceptable."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(LodgeChatError):
    """A referenced resource does not exist.

    Reported as 400 rather than 404: an unknown id is treated as a bad request.
    """

    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(LodgeChatError):
    """The caller could not be authenticated."""

    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(LodgeChatError):
    """The caller is authenticated but may not perform the action."""

    status_code = status.HTTP_403_FORBIDDEN
