from __future__ import annotations

import logging
from typing import Protocol

import requests
from twilio.base.exceptions import TwilioException, TwilioRestException
from twilio.http.http_client import TwilioHttpClient
from twilio.rest import Client

from app.core.config import Settings

logger = logging.getLogger(__name__)


class SmsSendError(RuntimeError):
    """Twilio failed to accept a message for one recipient."""

    def __init__(
        self,
        message: str,
        *,
        to: str,
        code: int | None = None,
        status: int | None = None,
    ) -> None:
        super().__init__(message)
        self.to = to
        self.code = code
        self.status = status


class SmsConfigurationError(RuntimeError):
    pass


class SmsSender(Protocol):
    def send(self, to: str, message: str) -> None:
        """Deliver ``message`` to ``to`` with exactly one provider call.

        Raises SmsSendError when the provider rejects the message or cannot be reached.
        """
        ...


class TwilioSmsSender:
    def __init__(self, client: Client, from_number: str) -> None:
        self._client = client
        self.from_number = from_number

    def send(self, to: str, message: str) -> None:
        try:
            created = self._client.messages.create(
                to=to,
                from_=self.from_number,
                body=message,
            )
        except TwilioRestException as exc:
            raise SmsSendError(
                f"Twilio rejected message ({exc.status}/{exc.code}): {exc.msg}",
                to=to,
                code=exc.code,
                status=exc.status,
            ) from exc
        except (TwilioException, requests.RequestException) as exc:  # network/timeout
            raise SmsSendError(f"Twilio request failed: {exc}", to=to) from exc

        logger.debug("Twilio accepted message (to=%s, sid=%s)", to, created.sid)


class DryRunSmsSender:
    """Logs instead of sending. Used when TWILIO_MOCK_MODE is enabled."""

    def send(self, to: str, message: str) -> None:
        logger.info("DRY_RUN: SMS not sent (to=%s, length=%s)", to, len(message))


def build_sms_sender(settings: Settings) -> SmsSender:
    if settings.twilio_mock_mode:
        logger.warning("TWILIO_MOCK_MODE=true, messages will not be delivered")
        return DryRunSmsSender()

    missing = settings.missing_twilio_settings
    if missing:
        raise SmsConfigurationError(
            "Twilio is not configured, set " + ", ".join(missing)
        )

    client = Client(
        settings.twilio_account_sid,
        settings.twilio_auth_token,
        http_client=TwilioHttpClient(timeout=settings.twilio_timeout),
    )
    logger.info("Twilio client configured (from=%s)", settings.twilio_phone_number)
    return TwilioSmsSender(client, settings.twilio_phone_number)
