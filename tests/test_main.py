"""End-to-end tests for the command runner."""

import io
import json
import os
from unittest.mock import patch

import pytest
from dependency_injector import providers
from twilio.base.exceptions import TwilioRestException

from twilio_sms.core.config.settings import LogSettings, Settings, TwilioSettings
from twilio_sms.core.di import Container
from twilio_sms.main import run


@pytest.fixture
def provider(fake_provider_class, make_message_record):
    return fake_provider_class(
        messages=[make_message_record(sid="SM1")],
        created=make_message_record(sid="SM2", status="queued"),
    )


@pytest.fixture
def container(provider):
    container = Container()
    container.messaging_provider.override(providers.Object(provider))
    yield container
    container.reset_override()


def invoke(argv, app_settings, container):
    stream = io.StringIO()
    status = run(argv, app_settings=app_settings, container=container, stream=stream)
    lines = stream.getvalue().splitlines()
    assert len(lines) == 1
    return status, json.loads(lines[0])


class TestRun:
    def test_list_success(self, app_settings, container):
        status, envelope = invoke(["list", "--limit", "5"], app_settings, container)

        assert status == 0
        assert envelope["ok"] is True
        assert [m["sid"] for m in envelope["data"]["messages"]] == ["SM1"]

    def test_send_success(self, app_settings, container, provider):
        status, envelope = invoke(
            ["send", "--to", "+15559990000", "--body", "Hi"], app_settings, container
        )

        assert status == 0
        assert envelope["data"]["sid"] == "SM2"
        assert envelope["data"]["status"] == "queued"
        assert provider.calls[0][0] == "create_message"

    def test_unknown_command(self, app_settings, container):
        status, envelope = invoke(["frobnicate"], app_settings, container)

        assert status == 1
        assert envelope == {
            "ok": False,
            "error": "Unknown command: frobnicate",
            "code": "USAGE",
            "details": "Commands: list, get, threads, send, numbers",
        }

    def test_no_command(self, app_settings, container):
        status, envelope = invoke([], app_settings, container)

        assert status == 1
        assert envelope["code"] == "USAGE"

    def test_unknown_flag(self, app_settings, container, provider):
        status, envelope = invoke(["numbers", "--bogus"], app_settings, container)

        assert status == 1
        assert envelope["code"] == "USAGE"
        assert provider.calls == []

    def test_validation_failure(self, app_settings, container, provider):
        argv = ["send", "--to", "+15559990000"]
        for i in range(11):
            argv += ["--media-url", f"https://example.com/{i}.png"]

        status, envelope = invoke(argv, app_settings, container)

        assert status == 1
        assert envelope["code"] == "VALIDATION"
        assert envelope["error"] == "Max 10 media URLs allowed"
        assert provider.calls == []

    def test_missing_credentials_checked_before_command(self, container, provider):
        with patch.dict(os.environ, {}, clear=True):
            app_settings = Settings(
                twilio=TwilioSettings(_env_file=None),
                log=LogSettings(_env_file=None),
                _env_file=None,
            )

        status, envelope = invoke(["frobnicate"], app_settings, container)

        assert status == 1
        assert envelope["code"] == "CONFIG"
        assert envelope["error"] == "Missing TWILIO_SID"
        assert provider.calls == []

    def test_provider_error_is_reported_verbatim(self, app_settings, container, provider):
        def fail(**kwargs):
            raise TwilioRestException(
                404,
                "https://api.twilio.com/2010-04-01/Accounts/AC_test/Messages/SMx.json",
                msg="The requested resource was not found",
                code=20404,
                details={"sid": "SMx"},
            )

        provider.fetch_message = lambda sid: fail(sid=sid)

        status, envelope = invoke(["get", "--sid", "SMx"], app_settings, container)

        assert status == 1
        assert envelope == {
            "ok": False,
            "error": "The requested resource was not found",
            "code": "20404",
            "details": {"sid": "SMx"},
        }

    def test_unexpected_error(self, app_settings, container, provider):
        def broken(limit=100):
            raise RuntimeError("socket closed")

        provider.list_phone_numbers = broken

        status, envelope = invoke(["numbers"], app_settings, container)

        assert status == 1
        assert envelope["code"] == "ERROR"
        assert envelope["error"] == "socket closed"
        assert "in `broken'" in envelope["details"].splitlines()[0]
