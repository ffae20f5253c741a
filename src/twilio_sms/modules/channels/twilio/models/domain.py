from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Media(BaseModel):
    """Media attachment of a message, with a browsable absolute URI."""

    sid: str
    content_type: Optional[str] = None
    uri: str

    model_config = ConfigDict(frozen=True)


class Message(BaseModel):
    """
    Canonical message shape emitted by every command.

    `from` is a Python keyword, so the field is `from_number` and the
    output key is restored through its alias.
    """

    sid: str
    from_number: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    body: Optional[str] = None
    status: Optional[str] = None
    direction: Optional[str] = None
    date_sent: Optional[str] = None
    date_created: Optional[str] = None
    num_media: int = Field(default=0, ge=0)
    price: Any = None
    error_code: Any = None
    error_message: Optional[str] = None
    media: Optional[List[Media]] = None

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator('sid')
    @classmethod
    def validate_sid(cls, v):
        if not v:
            raise ValueError('sid is required')
        return v

    @property
    def effective_date(self) -> str:
        """Sort key: date_sent, else date_created, else the empty string."""
        return self.date_sent or self.date_created or ""

    def to_output(self) -> Dict[str, Any]:
        """Output mapping; `media` is only present when it was populated."""
        data = self.model_dump(mode="json", by_alias=True)
        if self.media is None:
            data.pop("media")
        return data

    def __repr__(self) -> str:
        return (
            f"Message(sid={self.sid}, from={self.from_number}, to={self.to}, "
            f"direction={self.direction})"
        )


class PhoneNumber(BaseModel):
    """Phone number owned by the account, with flattened capability flags."""

    sid: str
    phone_number: str
    friendly_name: Optional[str] = None
    sms_enabled: Optional[bool] = None
    mms_enabled: Optional[bool] = None
    voice_enabled: Optional[bool] = None

    model_config = ConfigDict(frozen=True)
