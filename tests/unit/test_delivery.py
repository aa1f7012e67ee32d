"""
Unit tests for delivery value objects.
"""

import dataclasses

import pytest

from otp_delivery.domain.delivery import (
    NARRATIVE_FAILED,
    NARRATIVE_SENT,
    NARRATIVE_SKIPPED,
    Credentials,
    DeliveryResult,
    TransportConfig,
)


class TestDeliveryResult:
    """Test the named constructors."""

    def test_skipped_counts_as_success(self) -> None:
        result = DeliveryResult.skipped()

        assert result.succeeded is True
        assert result.narrative == NARRATIVE_SKIPPED
        assert result.diagnostic_id is None
        assert result.error_detail is None

    def test_sent_carries_delivery_id(self) -> None:
        result = DeliveryResult.sent("abc123")

        assert result.succeeded is True
        assert result.narrative == NARRATIVE_SENT
        assert result.diagnostic_id == "abc123"
        assert result.error_detail is None

    def test_failed_carries_error(self) -> None:
        result = DeliveryResult.failed("auth rejected")

        assert result.succeeded is False
        assert result.narrative == NARRATIVE_FAILED
        assert result.error_detail == "auth rejected"
        assert result.diagnostic_id is None

    def test_is_immutable(self) -> None:
        result = DeliveryResult.failed("auth rejected")

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.succeeded = True  # type: ignore[misc]


class TestTransportConfig:
    """Test the configured check."""

    def test_unconfigured_without_credentials(self) -> None:
        assert not TransportConfig(host="smtp.gmail.com", port=587, secure=False).is_configured

    def test_configured_with_credentials(self) -> None:
        config = TransportConfig(
            host="smtp.gmail.com",
            port=587,
            secure=False,
            credentials=Credentials(identity="portal@clinic.example", secret="app-token"),
        )

        assert config.is_configured
