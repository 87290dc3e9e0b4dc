"""
Exceptions raised by the FastOTP client.

Transport failures (connection errors, timeouts, TLS) are not wrapped: they
reach the caller as the httpx exceptions they are.
"""

import json
from typing import Any, Dict, Optional


class FastOTPError(Exception):
    """Base class for all FastOTP client errors."""


class APIError(FastOTPError):
    """The service answered with a non-200 status and a well-formed error body."""

    def __init__(
        self,
        status_code: int,
        message: str,
        errors: Optional[Dict[str, Any]] = None,
    ):
        self.status_code = status_code
        self.message = message
        self.errors = errors
        super().__init__(self.flattened())

    def flattened(self) -> str:
        """Message and error details folded into one line."""
        details = json.dumps(self.errors, default=str) if self.errors is not None else "null"
        return f"error: {self.message}, details: {details}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(status_code={self.status_code!r}, "
            f"message={self.message!r}, errors={self.errors!r})"
        )


class ErrorResponseParseError(FastOTPError):
    """The service answered with a non-200 status whose body could not be parsed."""

    def __init__(self, status_code: int, reason: str, body: bytes = b""):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"error parsing response: {reason}")


class ResponseDecodeError(FastOTPError):
    """A 200 response whose body did not match the expected shape."""
