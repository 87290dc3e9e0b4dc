"""
Error normalization shared by every FastOTP client operation.
"""

from typing import Optional

import httpx
from pydantic import ValidationError

from fastotp.core.exceptions import APIError, ErrorResponseParseError, FastOTPError
from fastotp.core.logging import get_logger
from fastotp.schemas.otp import ErrorResponse

logger = get_logger(__name__)


def parse_error_response(response: httpx.Response, body: Optional[bytes] = None) -> FastOTPError:
    """
    Turn a non-200 response into the exception to raise.

    The whole body is parsed as {message, errors?}. If that fails the parse
    failure is returned instead, since no API error is available.

    Args:
        response: The non-200 response
        body: Its full body; read from the response when not given

    Returns:
        APIError, or ErrorResponseParseError when the body is not an error document
    """
    if body is None:
        body = response.content
    try:
        error = ErrorResponse.model_validate_json(body)
    except ValidationError as e:
        logger.warning(
            "FastOTP error response could not be parsed",
            status_code=response.status_code,
            path=response.request.url.path,
        )
        return ErrorResponseParseError(response.status_code, str(e), body)

    logger.warning(
        "FastOTP request failed",
        status_code=response.status_code,
        path=response.request.url.path,
        message=error.message,
    )
    return APIError(response.status_code, error.message, error.errors)
