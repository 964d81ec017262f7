from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from tests.fakes import BAD_NUMBER, FakeSmsSender


@pytest.fixture
def settings() -> Settings:
    return Settings(
        SERVICE_NAME="test-sms-service",
        TWILIO_ACCOUNT_SID="ACtest",
        TWILIO_AUTH_TOKEN="secret",
        TWILIO_PHONE_NUMBER="+15005550006",
        SMS_MAX_CONCURRENCY=10,
    )


@pytest.fixture
def fake_sender() -> FakeSmsSender:
    return FakeSmsSender(fail_for={BAD_NUMBER})


@pytest.fixture
def client(settings: Settings, fake_sender: FakeSmsSender) -> TestClient:
    return TestClient(create_app(settings, sender=fake_sender))
