from enum import Enum
from typing import Optional


class MessageDirection(Enum):
    """
    Enum for message direction.

    Twilio reports inbound messages as "inbound" and outbound ones as
    "outbound-api", "outbound-call", "outbound-reply" and so on, so only
    the prefix is meaningful:
    - INBOUND: Message received by the local number
    - OUTBOUND: Message sent by the local number
    """

    INBOUND = "inbound"
    OUTBOUND = "outbound"

    @classmethod
    def from_twilio(cls, direction: Optional[str]) -> "MessageDirection":
        if direction and direction.startswith(cls.INBOUND.value):
            return cls.INBOUND
        return cls.OUTBOUND

    def __repr__(self) -> str:
        return f"MessageDirection.{self.name}"
