"""
Pytest configuration and shared fixtures.

This file provides common fixtures and configuration for all tests.

Decision: No custom event_loop fixture, pytest-asyncio handles it with
asyncio_mode = "auto" configured in pyproject.toml.
"""

import os

# Set test environment variables before config.settings is imported
# Use .setdefault() to respect values already set by docker-compose or other sources
os.environ.setdefault("LOG_LEVEL", "ERROR")
os.environ.setdefault("VERIFY_EMAIL_ON_STARTUP", "false")

import pytest  # noqa: E402

from config.settings import Settings  # noqa: E402


@pytest.fixture
def configured_settings() -> Settings:
    """Settings with SMTP credentials, independent of the environment and .env."""
    return Settings(
        _env_file=None,
        smtp_host="smtp.test.local",
        smtp_port=587,
        smtp_secure=False,
        smtp_user="sentinel@clinic.example",
        smtp_pass="app-token",
        smtp_timeout_seconds=5.0,
    )


@pytest.fixture
def unconfigured_settings() -> Settings:
    """Settings without SMTP credentials."""
    return Settings(_env_file=None, smtp_user=None, smtp_pass=None)
