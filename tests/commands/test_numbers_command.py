from types import SimpleNamespace

from twilio_sms.commands.base import CommandContext
from twilio_sms.commands.numbers import NUMBERS


def test_lists_numbers_with_capabilities(twilio_settings, fake_provider_class):
    provider = fake_provider_class(
        numbers=[
            SimpleNamespace(
                sid="PN1",
                phone_number="+15557770000",
                friendly_name="Main line",
                capabilities={"sms": True, "mms": True, "voice": False},
            )
        ]
    )

    payload = NUMBERS.execute([], CommandContext(twilio_settings, provider))

    assert payload == {
        "numbers": [
            {
                "sid": "PN1",
                "phone_number": "+15557770000",
                "friendly_name": "Main line",
                "sms_enabled": True,
                "mms_enabled": True,
                "voice_enabled": False,
            }
        ]
    }
    assert provider.calls == [("list_phone_numbers", dict(limit=100))]


def test_limit_flag(twilio_settings, fake_provider_class):
    provider = fake_provider_class()

    NUMBERS.execute(["--limit", "3"], CommandContext(twilio_settings, provider))

    assert provider.calls == [("list_phone_numbers", dict(limit=3))]
