"""
OTP schemas for requests to and responses from the FastOTP API.

Response models accept a JSON null wherever an object is expected and treat it
as an empty object, so a sparse but valid body still decodes.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class _NullAsEmpty(BaseModel):

    @model_validator(mode="before")
    @classmethod
    def _null_as_empty(cls, data: Any) -> Any:
        return {} if data is None else data


class OTP(_NullAsEmpty):
    """OTP record as returned by the service. Passed through untouched."""

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    identifier: Optional[str] = Field(None, description="Phone number, email or similar")
    type: Optional[str] = None
    status: Optional[str] = None
    delivery_methods: Optional[List[str]] = None
    delivery_details: Optional[Dict[str, Any]] = None
    expires_at: Optional[str] = Field(None, description="ISO-8601 timestamp")
    created_at: Optional[str] = Field(None, description="ISO-8601 timestamp")
    updated_at: Optional[str] = Field(None, description="ISO-8601 timestamp")


class GenerateOTPRequest(BaseModel):
    """Generate OTP request schema."""
    type: str = Field(..., description="OTP type, e.g. numeric")
    identifier: str = Field(..., description="Target the OTP is issued for")
    delivery: Dict[str, str] = Field(default_factory=dict, description="Channel name to address, e.g. {'sms': '+15550001'}")
    validity: int = Field(..., description="Validity duration, unit defined by the service")
    token_length: int = Field(..., description="Number of characters in the token")


class ValidateOTPRequest(BaseModel):
    """Validate OTP request schema."""
    identifier: str
    token: str


class OTPResponse(_NullAsEmpty):
    otp: OTP = Field(default_factory=OTP)

    @field_validator("otp", mode="before")
    @classmethod
    def _null_otp(cls, value: Any) -> Any:
        return {} if value is None else value


class GenerateOTPResponse(OTPResponse):
    """Response to generate and get requests."""


class ValidateOTPResponse(OTPResponse):
    """Response to validate requests. Inspect otp.status for the outcome."""


class ErrorResponse(_NullAsEmpty):
    """Error body returned with any non-200 status."""
    message: str = ""
    errors: Optional[Dict[str, Any]] = None

    @field_validator("message", mode="before")
    @classmethod
    def _null_message(cls, value: Any) -> Any:
        return "" if value is None else value
