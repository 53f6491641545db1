"""
Error type raised by every Livechat API call.

Two kinds of failures share the same exception:
- "API": the server answered with a non-success status, or the request
  never completed (code 0)
- "SDK": a required argument was missing, no request was sent
"""

from __future__ import annotations

from typing import Any, Literal

ErrorType = Literal["API", "SDK"]


class APIError(Exception):
    """
    Normalized Livechat error.

    Attributes:
        code: HTTP status for API errors (0 when the transport failed),
            caller-chosen code (usually 400) for SDK errors
        message: Human-readable description
        error_type: "API" or "SDK"
        details: Parsed response body or the underlying exception, if any
    """

    def __init__(
        self,
        code: int,
        message: str,
        error_type: ErrorType,
        details: Any | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.error_type = error_type
        self.details = details

    @property
    def is_api_error(self) -> bool:
        return self.error_type == "API"

    @property
    def is_sdk_error(self) -> bool:
        return self.error_type == "SDK"

    def __repr__(self) -> str:
        return (
            f"APIError(code={self.code!r}, message={self.message!r}, "
            f"error_type={self.error_type!r})"
        )
