"""
Integration tests for OTP delivery.

Tests the complete delivery flow through the API, from request to the
rendered email handed to the transport.
"""

from fastapi import status

from config.settings import Settings
from tests.mocks.stub_email_transport import StubEmailTransport

DELIVERY = {
    "destination": "patient@example.com",
    "code": "482913",
    "recipient_label": "Alex Doe",
}


class TestOtpDelivery:
    """Scenarios for the login flow's OTP delivery."""

    def test_unconfigured_transport_skips_delivery(
        self, make_client, unconfigured_settings: Settings, stub_transport: StubEmailTransport
    ) -> None:
        """Test no credentials: success reported, nothing sent."""
        client = make_client(unconfigured_settings)

        response = client.post("/api/v1/otp/deliveries", json=DELIVERY)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["succeeded"] is True
        assert "not configured" in data["narrative"]
        assert stub_transport.send_count == 0

    def test_configured_transport_sends_email(
        self, make_client, configured_settings: Settings, stub_transport: StubEmailTransport
    ) -> None:
        """Test credentials present and transport succeeding."""
        client = make_client(configured_settings)

        response = client.post("/api/v1/otp/deliveries", json=DELIVERY)

        data = response.json()
        assert data["succeeded"] is True
        assert data["diagnostic_id"] == "abc123"
        assert stub_transport.send_count == 1

        email = stub_transport.last_email
        assert email.destination == "patient@example.com"
        for body in (email.html_body, email.text_body):
            assert "482913" in body
            assert "5 minutes" in body
            assert "Alex Doe" in body

    def test_transport_failure_is_reported(
        self, make_client, configured_settings: Settings, stub_transport: StubEmailTransport
    ) -> None:
        """Test transport raising: failure reported in the body with HTTP 200."""
        stub_transport.send_error = RuntimeError("auth rejected")
        client = make_client(configured_settings)

        response = client.post("/api/v1/otp/deliveries", json=DELIVERY)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["succeeded"] is False
        assert data["error_detail"] == "auth rejected"
        assert data["diagnostic_id"] is None

    def test_repeated_requests_are_all_delivered(
        self, make_client, configured_settings: Settings, stub_transport: StubEmailTransport
    ) -> None:
        """Test identical requests are not deduplicated."""
        client = make_client(configured_settings)

        first = client.post("/api/v1/otp/deliveries", json=DELIVERY).json()
        second = client.post("/api/v1/otp/deliveries", json=DELIVERY).json()

        assert first == second
        assert stub_transport.send_count == 2


class TestEmailHealth:
    """Scenarios for the transport health check."""

    def test_unconfigured_is_degraded(
        self, make_client, unconfigured_settings: Settings, stub_transport: StubEmailTransport
    ) -> None:
        """Test no credentials: degraded without contacting the server."""
        client = make_client(unconfigured_settings)

        data = client.get("/api/v1/health/email").json()

        assert data["status"] == "degraded"
        assert stub_transport.verify_calls == []

    def test_configured_is_healthy(
        self, make_client, configured_settings: Settings, stub_transport: StubEmailTransport
    ) -> None:
        """Test credentials accepted by the transport."""
        client = make_client(configured_settings)

        data = client.get("/api/v1/health/email").json()

        assert data["status"] == "healthy"
        assert data["email_transport"] is True
        assert len(stub_transport.verify_calls) == 1

    def test_rejected_credentials_are_degraded(
        self, make_client, configured_settings: Settings, stub_transport: StubEmailTransport
    ) -> None:
        """Test credentials rejected by the transport."""
        stub_transport.verify_error = RuntimeError("auth rejected")
        client = make_client(configured_settings)

        data = client.get("/api/v1/health/email").json()

        assert data["status"] == "degraded"
        assert data["email_transport"] is False
