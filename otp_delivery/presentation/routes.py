"""
FastAPI routes for OTP delivery and transport health.

Each route is thin - it just handles HTTP concerns and delegates to the use case.
"""

import logging
from datetime import UTC, datetime
from typing import Annotated

from config.settings import settings
from fastapi import APIRouter, Depends, HTTPException, status

from otp_delivery.application.otp_notifier import OtpNotifier
from otp_delivery.presentation.dependencies import get_otp_notifier
from otp_delivery.presentation.schemas import (
    DeliverOtpRequest,
    DeliveryResultResponse,
    EmailHealthResponse,
    ErrorResponse,
    HealthCheckResponse,
)

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api/v1")


@router.post(
    "/otp/deliveries",
    response_model=DeliveryResultResponse,
    status_code=status.HTTP_200_OK,
    responses={
        200: {"description": "Delivery attempted, skipped or failed - see `succeeded`"},
        400: {"model": ErrorResponse, "description": "Invalid request"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Deliver a login OTP by email",
    description="""
    Deliver a one-time password to a patient by email.

    Business Rules:
    - Delivery is best-effort: a failed send is reported with succeeded=false,
      never as an HTTP error
    - Without SMTP credentials the OTP is written to the operational log and
      the call reports success
    - The OTP stays valid regardless of the delivery outcome
    """,
    tags=["otp"],
)
async def deliver_otp(
    request: DeliverOtpRequest,
    notifier: Annotated[OtpNotifier, Depends(get_otp_notifier)],
) -> DeliveryResultResponse:
    """
    Deliver an OTP.

    Decision: We return 200 for every outcome because delivery failure is
    data for the login flow, which keeps OTP entry open either way.
    """
    try:
        result = await notifier.send(
            destination=request.destination,
            code=request.code,
            recipient_label=request.recipient_label,
        )
    except Exception as e:
        logger.error(f"Unexpected error during OTP delivery: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "InternalError",
                "message": "An unexpected error occurred",
            },
        ) from e

    return DeliveryResultResponse.model_validate(result)


@router.get(
    "/health",
    response_model=HealthCheckResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Check if the service is running",
    tags=["health"],
)
async def health_check() -> HealthCheckResponse:
    """Liveness probe."""
    return HealthCheckResponse(
        status="healthy",
        service=settings.app_name,
        version=settings.app_version,
        timestamp=datetime.now(UTC),
    )


@router.get(
    "/health/email",
    response_model=EmailHealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Email transport health check",
    description="Connect and authenticate against the configured SMTP server without sending",
    tags=["health"],
)
async def email_health_check(
    notifier: Annotated[OtpNotifier, Depends(get_otp_notifier)],
) -> EmailHealthResponse:
    """
    Email transport health check.

    Decision: An unconfigured or unreachable transport reports "degraded"
    rather than an error status, since logins keep working without email.
    """
    transport_ok = await notifier.verify()

    return EmailHealthResponse(
        status="healthy" if transport_ok else "degraded",
        email_transport=transport_ok,
        timestamp=datetime.now(UTC),
    )
