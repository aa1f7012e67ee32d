"""
OTP Notifier use case.

Delivers a login OTP by email and reports the outcome as data:
1. Resolve the transport configuration
2. Degrade to the operational log when credentials are missing
3. Otherwise render and send the email
4. Convert any transport failure into a failed DeliveryResult

Authentication flows treat notification as best-effort, so nothing in here
raises to the caller.
"""

import logging
from collections.abc import Callable

from otp_delivery.application.email_transport import EmailTransport, OtpMessageBuilder
from otp_delivery.domain.delivery import (
    OTP_LOG_SUBJECT,
    DeliveryRequest,
    DeliveryResult,
    TransportConfig,
)

logger = logging.getLogger(__name__)

ConfigResolver = Callable[[], TransportConfig]


class OtpNotifier:
    """
    Use case for sending OTP emails and checking the email transport.

    Decision: All collaborators (config resolver, transport, message builder,
    logger) are injected so the send/verify logic is testable without a
    mail server or captured console output.
    """

    def __init__(
        self,
        config_resolver: ConfigResolver,
        transport: EmailTransport,
        message_builder: OtpMessageBuilder,
        audit_logger: logging.Logger | None = None,
    ):
        """
        Initialize the use case.

        Args:
            config_resolver: Returns a fresh TransportConfig on every call
            transport: Email transport adapter
            message_builder: Renders the OTP email
            audit_logger: Operational log channel (default: module logger)
        """
        self.config_resolver = config_resolver
        self.transport = transport
        self.message_builder = message_builder
        self.audit_logger = audit_logger or logger

    async def send(self, destination: str, code: str, recipient_label: str) -> DeliveryResult:
        """
        Deliver an OTP to `destination`.

        Args:
            destination: Recipient email address
            code: The OTP value
            recipient_label: Display name used in the greeting

        Returns:
            DeliveryResult. `succeeded` is False only when a send was
            attempted and failed; the OTP stays valid either way.
        """
        config = self._resolve_config()
        request = DeliveryRequest(
            destination=destination, code=code, recipient_label=recipient_label
        )

        if config is None or not config.is_configured:
            self._log_unconfigured(request)
            return DeliveryResult.skipped()

        try:
            email = self.message_builder.build(request)
            delivery_id = await self.transport.send(config, email)
        except Exception as e:
            self.audit_logger.error(f"[EMAIL ERROR] Failed to send OTP email to {destination}: {e}")
            self.audit_logger.warning(
                f"[FALLBACK] OTP email to: {destination} | "
                f"Subject: {OTP_LOG_SUBJECT} | OTP code: {code}"
            )
            return DeliveryResult.failed(str(e) or type(e).__name__)

        self.audit_logger.info(f"[EMAIL SENT] OTP sent to {destination} - Message ID: {delivery_id}")
        return DeliveryResult.sent(delivery_id)

    async def verify(self) -> bool:
        """
        Check that the configured transport is reachable and accepts the credentials.

        Used for operational health checks, never in the login path.

        Returns:
            True if the handshake and authentication succeed, False otherwise
        """
        config = self._resolve_config()
        if config is None or not config.is_configured:
            return False

        try:
            await self.transport.verify(config)
        except Exception as e:
            self.audit_logger.error(f"Email configuration verification failed: {e}")
            return False

        self.audit_logger.info(f"Email transport verified: {config.host}:{config.port}")
        return True

    def _resolve_config(self) -> TransportConfig | None:
        """Unreadable settings (e.g. SMTP_PORT=abc) count as an unconfigured transport."""
        try:
            return self.config_resolver()
        except Exception as e:
            self.audit_logger.error(f"Invalid email transport configuration: {e}")
            return None

    def _log_unconfigured(self, request: DeliveryRequest) -> None:
        """Record the would-be email so an operator can still complete the login."""
        self.audit_logger.warning(
            f"[EMAIL NOT CONFIGURED] OTP email would be sent to: {request.destination}\n"
            f"   Subject: {OTP_LOG_SUBJECT}\n"
            f"   Body: Your OTP code is {request.code}\n"
            "   Note: Configure SMTP_USER and SMTP_PASS (environment or .env) "
            "to enable email sending"
        )
