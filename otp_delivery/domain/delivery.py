"""
Delivery value objects.

Everything here is created, used and discarded within a single delivery call.
Value objects are immutable and defined by their attributes.
"""

from dataclasses import dataclass

# The OTP is issued by the login flow and stays valid for 5 minutes.
# Both email bodies must state this literally.
OTP_VALIDITY_MINUTES = 5

OTP_EMAIL_SUBJECT = "Your Sentinel Login OTP Code"
OTP_LOG_SUBJECT = "Sentinel Login OTP"

NARRATIVE_SKIPPED = "delivery skipped, transport not configured"
NARRATIVE_SENT = "OTP email sent successfully"
NARRATIVE_FAILED = "delivery failed, OTP still valid"


@dataclass(frozen=True)
class Credentials:
    """SMTP authentication pair."""

    identity: str
    secret: str

    def __repr__(self) -> str:
        return f"Credentials(identity={self.identity!r}, secret='***')"


@dataclass(frozen=True)
class TransportConfig:
    """
    Resolved email transport settings.

    `credentials` is None in an unconfigured environment. That is a
    legal state which makes the notifier degrade to logging.
    """

    host: str
    port: int
    secure: bool
    credentials: Credentials | None = None
    sender_name: str = "Sentinel Healthcare"
    timeout_seconds: float = 10.0

    @property
    def is_configured(self) -> bool:
        return self.credentials is not None


@dataclass(frozen=True)
class DeliveryRequest:
    """What to deliver and to whom. Not validated here."""

    destination: str
    code: str
    recipient_label: str


@dataclass(frozen=True)
class OtpEmail:
    """Rendered OTP message, ready to hand to a transport."""

    destination: str
    subject: str
    html_body: str
    text_body: str


@dataclass(frozen=True)
class DeliveryResult:
    """
    Outcome of one delivery attempt.

    This is the sole return value of a send: callers branch on `succeeded`
    instead of catching exceptions. Use the named constructors below.
    """

    succeeded: bool
    narrative: str
    diagnostic_id: str | None = None
    error_detail: str | None = None

    @classmethod
    def skipped(cls) -> "DeliveryResult":
        """Transport not configured; the login flow must still proceed."""
        return cls(succeeded=True, narrative=NARRATIVE_SKIPPED)

    @classmethod
    def sent(cls, diagnostic_id: str) -> "DeliveryResult":
        return cls(succeeded=True, narrative=NARRATIVE_SENT, diagnostic_id=diagnostic_id)

    @classmethod
    def failed(cls, error_detail: str) -> "DeliveryResult":
        return cls(succeeded=False, narrative=NARRATIVE_FAILED, error_detail=error_detail)
