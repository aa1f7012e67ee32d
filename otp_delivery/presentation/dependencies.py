"""
FastAPI dependency injection.

This module wires the layers together (domain, application, infrastructure).

Decision: Using FastAPI's dependency injection system provides:
1. Clean separation of concerns
2. Easy testing (dependency_overrides can inject stubs)
3. Type safety
"""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from otp_delivery.application.email_transport import EmailTransport, OtpMessageBuilder
from otp_delivery.application.otp_notifier import ConfigResolver, OtpNotifier
from otp_delivery.infrastructure.email.otp_message_builder import JinjaOtpMessageBuilder
from otp_delivery.infrastructure.email.smtp_email_transport import SmtpEmailTransport
from otp_delivery.infrastructure.email.transport_configurator import resolve_transport_config

logger = logging.getLogger(__name__)


def get_config_resolver() -> ConfigResolver:
    """
    Get the transport config resolver.

    Decision: The resolver reads a fresh settings snapshot per delivery, so
    credentials added to the environment are picked up without a restart.
    """
    return resolve_transport_config


def get_email_transport() -> EmailTransport:
    """Get the SMTP transport. It holds no connection between calls."""
    return SmtpEmailTransport()


@lru_cache
def get_message_builder() -> OtpMessageBuilder:
    """
    Get the message builder (singleton).

    Decision: lru_cache keeps one Jinja2 environment and its template cache.
    """
    logger.info("Creating OTP message builder")
    return JinjaOtpMessageBuilder()


def get_otp_notifier(
    config_resolver: Annotated[ConfigResolver, Depends(get_config_resolver)],
    transport: Annotated[EmailTransport, Depends(get_email_transport)],
    message_builder: Annotated[OtpMessageBuilder, Depends(get_message_builder)],
) -> OtpNotifier:
    """
    Get the OtpNotifier use case with dependencies injected.

    Args:
        config_resolver: Transport config resolver (injected)
        transport: Email transport (injected)
        message_builder: OTP email renderer (injected)

    Returns:
        OtpNotifier instance
    """
    return OtpNotifier(config_resolver, transport, message_builder)
