"""
API request/response schemas (DTOs).

These Pydantic models define the API contract for requests and responses.

Decision: We keep these separate from domain value objects. In particular the
response never carries the OTP itself.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class DeliverOtpRequest(BaseModel):
    """Request schema for OTP delivery."""

    destination: str = Field(
        ...,
        min_length=1,
        description="Recipient email address",
        examples=["patient@example.com"],
    )
    code: str = Field(
        ...,
        min_length=1,
        description="One-time password issued by the login flow",
        examples=["482913"],
    )
    recipient_label: str = Field(
        ...,
        description="Display name used in the greeting",
        examples=["Alex Doe"],
    )


class DeliveryResultResponse(BaseModel):
    """Response schema for OTP delivery."""

    model_config = ConfigDict(from_attributes=True)

    succeeded: bool = Field(..., description="False only when an attempted send failed")
    diagnostic_id: str | None = Field(None, description="Transport delivery identifier")
    error_detail: str | None = Field(None, description="Underlying transport failure")
    narrative: str = Field(
        ...,
        description="Human-readable outcome",
        examples=["OTP email sent successfully"],
    )


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Human-readable error message")


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Service status", examples=["healthy"])
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    timestamp: datetime = Field(..., description="Current server time")


class EmailHealthResponse(BaseModel):
    """Email transport health response schema."""

    status: str = Field(..., description="healthy or degraded", examples=["healthy"])
    email_transport: bool = Field(
        ..., description="Whether the SMTP server accepted the configured credentials"
    )
    timestamp: datetime = Field(..., description="Current server time")
