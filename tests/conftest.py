import os
import sys
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import patch

import pytest

# Set required environment variables for testing
# These must be set before importing any module that instantiates Settings
os.environ.setdefault("TWILIO_SID", "AC_test")
os.environ.setdefault("TWILIO_TOKEN", "test-token")
os.environ.setdefault("LOG_LEVEL", "WARNING")

# Ensure the src layout is importable without an install
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from twilio_sms.core.config.settings import LogSettings, Settings, TwilioSettings  # noqa: E402


def utc(year, month, day, hour=0, minute=0, second=0):
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)


@pytest.fixture
def make_message_record():
    """Factory for objects shaped like twilio MessageInstance."""

    def _make(**overrides):
        fields = dict(
            sid="SM00000000000000000000000000000001",
            from_="+15550001111",
            to="+15557770000",
            body="Hello",
            status="delivered",
            direction="outbound-api",
            date_sent=utc(2024, 1, 1, 12, 0, 0),
            date_created=utc(2024, 1, 1, 11, 59, 58),
            num_media="0",
            price="-0.00790",
            error_code=None,
            error_message=None,
        )
        fields.update(overrides)
        return SimpleNamespace(**fields)

    return _make


@pytest.fixture
def twilio_settings():
    # Isolated from the developer environment and any .env file
    with patch.dict(os.environ, {}, clear=True):
        return TwilioSettings(
            account_sid="AC_test",
            auth_token="test-token",
            default_number="+15557770000",
            _env_file=None,
        )


@pytest.fixture
def app_settings(twilio_settings):
    return Settings(twilio=twilio_settings, log=LogSettings(level="WARNING"))


class FakeMessagingProvider:
    """In-memory MessagingProvider recording every call."""

    def __init__(self, messages=None, media=None, numbers=None, created=None):
        self.messages = list(messages or [])
        self.media = list(media or [])
        self.numbers = list(numbers or [])
        self.created = created
        self.calls = []

    def list_messages(
        self,
        from_number=None,
        to_number=None,
        date_sent_after=None,
        date_sent_before=None,
        limit=50,
    ):
        self.calls.append(
            (
                "list_messages",
                dict(
                    from_number=from_number,
                    to_number=to_number,
                    date_sent_after=date_sent_after,
                    date_sent_before=date_sent_before,
                    limit=limit,
                ),
            )
        )
        result = [
            m
            for m in self.messages
            if (from_number is None or m.from_ == from_number)
            and (to_number is None or m.to == to_number)
        ]
        return result[:limit]

    def fetch_message(self, sid):
        self.calls.append(("fetch_message", dict(sid=sid)))
        return next(m for m in self.messages if m.sid == sid)

    def list_media(self, sid):
        self.calls.append(("list_media", dict(sid=sid)))
        return self.media

    def create_message(
        self,
        to_number,
        body=None,
        media_urls=None,
        from_number=None,
        messaging_service_sid=None,
    ):
        self.calls.append(
            (
                "create_message",
                dict(
                    to_number=to_number,
                    body=body,
                    media_urls=media_urls,
                    from_number=from_number,
                    messaging_service_sid=messaging_service_sid,
                ),
            )
        )
        return self.created

    def list_phone_numbers(self, limit=100):
        self.calls.append(("list_phone_numbers", dict(limit=limit)))
        return self.numbers[:limit]


@pytest.fixture
def fake_provider_class():
    return FakeMessagingProvider
