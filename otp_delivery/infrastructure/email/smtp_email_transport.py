"""
SMTP email transport.

Sends OTP emails with aiosmtplib. For local development Mailhog works
(SMTP on port 1025); in production this connects to the configured
provider, typically a submission port with STARTTLS (smtp.gmail.com:587).

Decision: One SMTP session per call, opened and closed inside `async with`,
so the connection is released on success, failure and timeout alike.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr, make_msgid

import aiosmtplib

from otp_delivery.application.email_transport import EmailTransport
from otp_delivery.domain.delivery import Credentials, OtpEmail, TransportConfig
from otp_delivery.domain.exceptions import EmailTransportError, EmailTransportTimeoutError

logger = logging.getLogger(__name__)


class SmtpEmailTransport(EmailTransport):
    """
    Email transport that talks SMTP.

    SMTP_SECURE=true selects implicit TLS (port 465). Otherwise aiosmtplib
    upgrades with STARTTLS when the server offers it.
    """

    async def send(self, config: TransportConfig, email: OtpEmail) -> str:
        """
        Send the OTP email.

        Returns:
            The Message-ID of the sent email, used as delivery identifier

        Raises:
            EmailTransportError: If connecting, authenticating or sending fails
            EmailTransportTimeoutError: If the exchange exceeds the timeout
        """
        credentials = self._require_credentials(config)
        message = self._build_message(config, credentials, email)

        logger.info(f"Sending OTP email to {email.destination} via {config.host}:{config.port}")
        async with self._session(config, credentials) as smtp:
            await smtp.send_message(message)

        return str(message["Message-ID"])

    async def verify(self, config: TransportConfig) -> None:
        """Open a session and authenticate, then disconnect without sending."""
        credentials = self._require_credentials(config)
        async with self._session(config, credentials):
            pass

    @asynccontextmanager
    async def _session(
        self, config: TransportConfig, credentials: Credentials
    ) -> AsyncIterator[aiosmtplib.SMTP]:
        """
        Connected and authenticated SMTP session.

        The whole exchange, including whatever runs in the body, is bounded by
        `config.timeout_seconds`. Transport errors are translated to
        EmailTransportError with the underlying message preserved.
        """
        try:
            async with asyncio.timeout(config.timeout_seconds):
                async with aiosmtplib.SMTP(
                    hostname=config.host,
                    port=config.port,
                    use_tls=config.secure,
                    timeout=config.timeout_seconds,
                ) as smtp:
                    await smtp.login(credentials.identity, credentials.secret)
                    yield smtp
        # TimeoutError is an OSError, match it first
        except TimeoutError as e:
            logger.error(f"SMTP exchange with {config.host}:{config.port} timed out")
            raise EmailTransportTimeoutError(config.timeout_seconds) from e
        except (aiosmtplib.SMTPException, OSError) as e:
            # str() of a response error is the (code, message) tuple
            if isinstance(e, aiosmtplib.SMTPResponseException):
                detail = e.message
            else:
                detail = str(e)
            detail = detail or type(e).__name__
            logger.error(f"SMTP exchange with {config.host}:{config.port} failed: {detail}")
            raise EmailTransportError(detail) from e

    @staticmethod
    def _require_credentials(config: TransportConfig) -> Credentials:
        if config.credentials is None:
            raise EmailTransportError("SMTP credentials are not configured")
        return config.credentials

    @staticmethod
    def _build_message(
        config: TransportConfig, credentials: Credentials, email: OtpEmail
    ) -> MIMEMultipart:
        # Plain text first, HTML last: clients pick the last part they can render
        message = MIMEMultipart("alternative")
        message["Subject"] = email.subject
        message["From"] = formataddr((config.sender_name, credentials.identity))
        message["To"] = email.destination
        message["Message-ID"] = make_msgid(domain=_sender_domain(credentials, config))

        message.attach(MIMEText(email.text_body, "plain", _charset="utf-8"))
        message.attach(MIMEText(email.html_body, "html", _charset="utf-8"))
        return message


def _sender_domain(credentials: Credentials, config: TransportConfig) -> str:
    _, at, domain = credentials.identity.rpartition("@")
    return domain if at and domain else config.host
