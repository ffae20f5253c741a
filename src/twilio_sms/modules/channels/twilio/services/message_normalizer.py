"""
Maps Twilio SDK records into the canonical output models.
"""

from typing import Any, Iterable, List

from twilio_sms.modules.channels.twilio.models.domain import Media, Message, PhoneNumber
from twilio_sms.modules.channels.twilio.utils.helpers import (
    format_timestamp,
    media_browse_url,
)


def normalize_message(record: Any) -> Message:
    """
    Normalize one provider message record.

    Timestamps become ISO-8601 text (or None) and num_media an int
    defaulting to 0. Every other field is passed through untouched.

    Args:
        record: MessageInstance (or any object exposing the same attributes)

    Returns:
        Message model
    """
    return Message(
        sid=record.sid,
        from_number=record.from_,
        to=record.to,
        body=record.body,
        status=record.status,
        direction=record.direction,
        date_sent=format_timestamp(record.date_sent),
        date_created=format_timestamp(record.date_created),
        num_media=int(record.num_media or 0),
        price=record.price,
        error_code=record.error_code,
        error_message=record.error_message,
    )


def normalize_media(records: Iterable[Any], api_base_url: str) -> List[Media]:
    return [
        Media(
            sid=media.sid,
            content_type=media.content_type,
            uri=media_browse_url(api_base_url, media.uri),
        )
        for media in records
    ]


def normalize_phone_number(record: Any) -> PhoneNumber:
    capabilities = record.capabilities or {}
    return PhoneNumber(
        sid=record.sid,
        phone_number=record.phone_number,
        friendly_name=record.friendly_name,
        sms_enabled=capabilities.get("sms"),
        mms_enabled=capabilities.get("mms"),
        voice_enabled=capabilities.get("voice"),
    )
