"""
Main application entry point.

This module initializes and configures the FastAPI application.
It handles startup/shutdown events and wires everything together.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from config.settings import settings
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from otp_delivery.application.otp_notifier import OtpNotifier
from otp_delivery.presentation.dependencies import (
    get_config_resolver,
    get_email_transport,
    get_message_builder,
)
from otp_delivery.presentation.routes import router

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Startup: log whether the email transport is usable. A failed check only
    logs, since OTP logins degrade to the operational log without email.
    """
    logger.info(f"Starting {settings.app_name}...")

    if settings.verify_email_on_startup:
        notifier = OtpNotifier(get_config_resolver(), get_email_transport(), get_message_builder())
        if await notifier.verify():
            logger.info("Email transport ready")
        else:
            logger.warning(
                "Email transport unavailable - OTPs will be written to the operational log"
            )

    logger.info("Application startup complete")

    yield

    logger.info(f"Shutting down {settings.app_name}...")


# Create FastAPI application
app = FastAPI(
    title="OTP Delivery API",
    description="""
    One-time password delivery for the Sentinel patient portal login flow.

    ## Features
    - Best-effort OTP delivery by email (HTML + plain text)
    - Degrades to the operational log when SMTP is not configured
    - Email transport health check
    """,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# No CORS middleware: callers are backend services, never browsers.


# Custom exception handler for Pydantic validation errors
# Decision: Return 400 Bad Request instead of 422 Unprocessable Entity
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors and return 400 Bad Request."""
    errors = exc.errors()
    error_messages = [f"{err['loc'][-1]}: {err['msg']}" for err in errors]

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": {
                "error": "ValidationError",
                "message": "Request validation failed",
                "errors": error_messages,
            }
        },
    )


# Include routes
app.include_router(router)


# Root endpoint
@app.get("/", tags=["root"])
async def root() -> dict[str, str]:
    """Root endpoint with API information."""
    return {
        "service": "OTP Delivery API",
        "version": settings.app_version,
        "status": "running",
        "docs": "/docs",
        "health": "/api/v1/health",
        "email_health": "/api/v1/health/email",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "otp_delivery.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
