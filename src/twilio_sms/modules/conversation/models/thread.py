from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from twilio_sms.modules.channels.twilio.models.domain import Message


class ConversationThread(BaseModel):
    """
    Messages exchanged with one counterparty, oldest first.
    """

    participant: Optional[str]
    message_count: int
    messages: List[Message]

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_message_count(self) -> "ConversationThread":
        if self.message_count != len(self.messages):
            raise ValueError("message_count must equal the number of messages")
        return self

    @classmethod
    def from_messages(cls, participant: Optional[str], messages: List[Message]) -> "ConversationThread":
        return cls(participant=participant, message_count=len(messages), messages=messages)

    @property
    def last_date_sent(self) -> str:
        if not self.messages:
            return ""
        return self.messages[-1].date_sent or ""

    def to_output(self) -> Dict[str, Any]:
        return {
            "participant": self.participant,
            "message_count": self.message_count,
            "messages": [m.to_output() for m in self.messages],
        }
