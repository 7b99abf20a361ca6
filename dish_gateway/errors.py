from __future__ import annotations

from typing import Any


class GatewayError(Exception):
    """Base error for failures the gateway reports to its caller.

    Attributes:
        message: client-facing message, returned as ``{"error": message}``
        http_status: status code used by the app's exception handler
    """

    http_status = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message}

    def __str__(self) -> str:
        return self.message


class UpstreamError(GatewayError):
    """The completion provider could not be reached or rejected the call."""

    default_message = "Upstream completion request failed"


class EmptyCompletionError(UpstreamError):
    """The provider answered, but with no usable candidate."""

    default_message = "Invalid response from upstream completion API"
