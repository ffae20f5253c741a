from datetime import datetime
from typing import Any, List, Optional, Protocol


class MessagingProvider(Protocol):
    """Interface for the messaging provider used by the commands."""

    def list_messages(
        self,
        from_number: Optional[str] = None,
        to_number: Optional[str] = None,
        date_sent_after: Optional[datetime] = None,
        date_sent_before: Optional[datetime] = None,
        limit: int = 50,
    ) -> List[Any]:
        """List messages matching the given filters (single bounded page)."""
        ...

    def fetch_message(self, sid: str) -> Any:
        """Fetch one message by SID."""
        ...

    def list_media(self, sid: str) -> List[Any]:
        """List media attachments of a message."""
        ...

    def create_message(
        self,
        to_number: str,
        body: Optional[str] = None,
        media_urls: Optional[List[str]] = None,
        from_number: Optional[str] = None,
        messaging_service_sid: Optional[str] = None,
    ) -> Any:
        """Create (send) a message from a number or via a messaging service."""
        ...

    def list_phone_numbers(self, limit: int = 100) -> List[Any]:
        """List incoming phone numbers owned by the account."""
        ...
