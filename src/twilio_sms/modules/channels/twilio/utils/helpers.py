from datetime import datetime, timezone
from typing import Optional

from twilio_sms.core.utils import get_logger

logger = get_logger(__name__)

RESOURCE_SUFFIX = ".json"


def media_browse_url(api_base_url: str, resource_uri: str) -> str:
    """
    Turn a media resource path into an absolute browsable URL.

    Args:
        api_base_url: Twilio API host (e.g. https://api.twilio.com)
        resource_uri: Relative JSON resource path returned by the API

    Returns:
        Absolute URL without the resource-format suffix
    """
    return f"{api_base_url.rstrip('/')}{resource_uri.removesuffix(RESOURCE_SUFFIX)}"


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """ISO-8601 text with UTC offset, or None when the provider has no value."""
    if value is None:
        return None
    return value.isoformat()


def parse_time(value: Optional[str], flag: str = "") -> Optional[datetime]:
    """
    Parse a --since/--until bound.

    Only ISO-8601 is accepted. Unparseable input means "no bound": the
    filter is not applied and a warning is logged rather than failing the
    command.

    Offset-bearing values are converted to UTC: the SDK formats bounds as
    `...Z` without applying tzinfo. Naive values are kept as is.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        logger.warning("Ignoring unparseable date bound", flag=flag, value=value)
        return None
    if parsed.tzinfo is not None:
        return parsed.astimezone(timezone.utc)
    return parsed
