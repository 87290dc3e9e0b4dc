"""
FastOTP client.

Generate, validate and look up one-time passwords through the FastOTP API.
"""

from fastotp.core.exceptions import (  # noqa: F401
    APIError,
    ErrorResponseParseError,
    FastOTPError,
    ResponseDecodeError,
)
from fastotp.schemas.otp import (  # noqa: F401
    OTP,
    ErrorResponse,
    GenerateOTPRequest,
    GenerateOTPResponse,
    ValidateOTPRequest,
    ValidateOTPResponse,
)
from fastotp.services.otp_client import (  # noqa: F401
    AsyncFastOTPClient,
    FastOTPClient,
    init,
    init_async,
)

__version__ = "1.0.0"
