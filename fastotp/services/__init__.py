"""
Services module for the FastOTP client.

Contains the API client and the error normalization it relies on.
"""

from .otp_client import AsyncFastOTPClient, FastOTPClient, init, init_async  # noqa: F401
from .errors import parse_error_response  # noqa: F401
