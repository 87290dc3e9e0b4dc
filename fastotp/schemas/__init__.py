"""
Wire schemas for the FastOTP API.
"""

from .otp import (  # noqa: F401
    OTP,
    ErrorResponse,
    GenerateOTPRequest,
    GenerateOTPResponse,
    OTPResponse,
    ValidateOTPRequest,
    ValidateOTPResponse,
)
