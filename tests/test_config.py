from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.__main__ import main
from app.core.config import Settings, get_settings
from app.main import create_app
from app.services.sms_service import DryRunSmsSender, SmsConfigurationError


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("TWILIO_ACCOUNT_SID", "ACenv")
    monkeypatch.setenv("TWILIO_AUTH_TOKEN", "token")
    monkeypatch.setenv("TWILIO_PHONE_NUMBER", "+15005550006")
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("SMS_MAX_CONCURRENCY", "4")

    settings = Settings()

    assert settings.twilio_account_sid == "ACenv"
    assert settings.port == 9090
    assert settings.sms_max_concurrency == 4
    assert settings.missing_twilio_settings == []


def test_defaults(monkeypatch):
    for name in ("PORT", "SMS_MAX_CONCURRENCY", "SERVICE_NAME", "TWILIO_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.port == 8080
    assert settings.sms_max_concurrency == 10
    assert settings.service_name == "twilio-sms-service"
    assert settings.twilio_timeout == 30.0


def test_concurrency_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(SMS_MAX_CONCURRENCY=0)


def test_create_app_wires_dispatcher_capacity():
    app = create_app(Settings(TWILIO_MOCK_MODE=True, SMS_MAX_CONCURRENCY=3))

    assert isinstance(app.state.sms_sender, DryRunSmsSender)
    assert app.state.dispatcher.max_concurrency == 3
    assert app.state.dispatcher.sender is app.state.sms_sender


def test_create_app_fails_fast_without_credentials(monkeypatch):
    for name in ("TWILIO_ACCOUNT_SID", "TWILIO_AUTH_TOKEN", "TWILIO_PHONE_NUMBER"):
        monkeypatch.delenv(name, raising=False)

    with pytest.raises(SmsConfigurationError):
        create_app(Settings(TWILIO_MOCK_MODE=False))


def test_log_level_is_case_insensitive():
    assert Settings(LOG_LEVEL="debug").log_level == "DEBUG"


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="verbose")


def test_entry_point_exits_on_invalid_configuration(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    get_settings.cache_clear()
    try:
        with pytest.raises(SystemExit) as excinfo:
            main()
    finally:
        get_settings.cache_clear()

    assert "Invalid configuration" in str(excinfo.value.code)
