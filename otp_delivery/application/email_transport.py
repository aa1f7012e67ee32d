"""
Email transport interface (Port).

Defines the contracts the notifier depends on.
The infrastructure layer provides the adapter implementations.
"""

from abc import ABC, abstractmethod
from typing import Protocol

from otp_delivery.domain.delivery import DeliveryRequest, OtpEmail, TransportConfig


class EmailTransport(ABC):
    """
    Abstract interface for email sending.

    This is a "port" in Hexagonal Architecture.
    The infrastructure layer provides the concrete adapter.

    Decision: The resolved TransportConfig is passed on every call instead of
    being held by the adapter, so each call opens and owns its own session.
    """

    @abstractmethod
    async def send(self, config: TransportConfig, email: OtpEmail) -> str:
        """
        Send an OTP email.

        Args:
            config: Resolved transport configuration (credentials present)
            email: Rendered message

        Returns:
            Delivery identifier assigned to the message

        Raises:
            EmailTransportError: If connecting, authenticating or sending fails
        """
        pass

    @abstractmethod
    async def verify(self, config: TransportConfig) -> None:
        """
        Connect and authenticate without sending anything.

        Raises:
            EmailTransportError: If the handshake or authentication fails
        """
        pass


class OtpMessageBuilder(Protocol):
    """Renders the subject and both bodies of an OTP email."""

    def build(self, request: DeliveryRequest) -> OtpEmail:
        ...
