"""
Delivery exceptions.

These never reach the caller of the notifier: they are raised by transport
adapters and converted into a failed DeliveryResult at a single boundary.
"""


class DeliveryError(Exception):
    """Base exception for all delivery errors."""

    pass


class EmailTransportError(DeliveryError):
    """Raised when connecting, authenticating or sending over SMTP fails."""

    pass


class EmailTransportTimeoutError(EmailTransportError):
    """Raised when an SMTP exchange does not complete in time."""

    def __init__(self, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(f"SMTP exchange timed out after {timeout_seconds:g} seconds")
