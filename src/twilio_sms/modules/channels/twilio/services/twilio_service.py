"""
Twilio service for listing, fetching and sending messages.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from twilio.rest import Client as TwilioClient

from twilio_sms.core.config.settings import TwilioSettings
from twilio_sms.core.utils import get_logger

logger = get_logger(__name__)


def create_twilio_client(twilio_settings: TwilioSettings) -> TwilioClient:
    """
    Build the REST client after checking the mandatory credentials.

    Raises:
        ConfigurationError: if the account SID or auth token is missing
    """
    twilio_settings.require_credentials()
    return TwilioClient(twilio_settings.account_sid, twilio_settings.auth_token)


class TwilioService:
    """
    MessagingProvider backed by the Twilio REST API.

    TwilioRestException is left to propagate so callers can surface the
    provider's message, code and details verbatim.
    """

    def __init__(self, client: TwilioClient):
        """
        Initialize Twilio service.

        Args:
            client: Authenticated Twilio REST client
        """
        self.client = client

    def list_messages(
        self,
        from_number: Optional[str] = None,
        to_number: Optional[str] = None,
        date_sent_after: Optional[datetime] = None,
        date_sent_before: Optional[datetime] = None,
        limit: int = 50,
    ) -> List[Any]:
        params: Dict[str, Any] = {"limit": limit}
        if from_number:
            params["from_"] = from_number
        if to_number:
            params["to"] = to_number
        if date_sent_after:
            params["date_sent_after"] = date_sent_after
        if date_sent_before:
            params["date_sent_before"] = date_sent_before

        logger.debug("Listing messages", limit=limit, from_=from_number, to=to_number)
        return self.client.messages.list(**params)

    def fetch_message(self, sid: str) -> Any:
        logger.debug("Fetching message", message_sid=sid)
        return self.client.messages(sid).fetch()

    def list_media(self, sid: str) -> List[Any]:
        logger.debug("Listing media", message_sid=sid)
        return self.client.messages(sid).media.list()

    def create_message(
        self,
        to_number: str,
        body: Optional[str] = None,
        media_urls: Optional[List[str]] = None,
        from_number: Optional[str] = None,
        messaging_service_sid: Optional[str] = None,
    ) -> Any:
        params: Dict[str, Any] = {"to": to_number}
        if messaging_service_sid:
            params["messaging_service_sid"] = messaging_service_sid
        else:
            params["from_"] = from_number
        if body is not None:
            params["body"] = body
        if media_urls:
            params["media_url"] = media_urls

        message = self.client.messages.create(**params)
        logger.info(
            "Message sent via Twilio",
            message_sid=message.sid,
            to=to_number,
            via_messaging_service=bool(messaging_service_sid),
        )
        return message

    def list_phone_numbers(self, limit: int = 100) -> List[Any]:
        logger.debug("Listing phone numbers", limit=limit)
        return self.client.incoming_phone_numbers.list(limit=limit)
