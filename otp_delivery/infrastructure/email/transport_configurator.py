"""
Transport configurator.

Resolves the SMTP endpoint and credentials from the environment.
Called once per delivery attempt, so it only builds a settings snapshot.
"""

from config.settings import Settings

from otp_delivery.domain.delivery import Credentials, TransportConfig


def resolve_transport_config(settings: Settings | None = None) -> TransportConfig:
    """
    Build a TransportConfig from a settings snapshot.

    Args:
        settings: Settings to read (default: a fresh snapshot of the environment)

    Returns:
        TransportConfig. `credentials` is None unless both SMTP_USER and
        SMTP_PASS are set.
    """
    current = settings if settings is not None else Settings()

    credentials = None
    if current.smtp_user and current.smtp_pass:
        credentials = Credentials(identity=current.smtp_user, secret=current.smtp_pass)

    return TransportConfig(
        host=current.smtp_host,
        port=current.smtp_port,
        secure=current.smtp_secure,
        credentials=credentials,
        sender_name=current.smtp_from_name,
        timeout_seconds=current.smtp_timeout_seconds,
    )
