"""
Client-side conversation threading.

The Twilio API has no thread concept, so threads are rebuilt from the
messages sent by and received at the local number.
"""

from typing import Dict, Iterable, List, Optional

from twilio_sms.modules.channels.twilio.models.domain import Message
from twilio_sms.modules.conversation.enums import MessageDirection
from twilio_sms.modules.conversation.models import ConversationThread


def counterparty(message: Message) -> Optional[str]:
    """The other side of the conversation: sender if inbound, recipient otherwise."""
    if MessageDirection.from_twilio(message.direction) is MessageDirection.INBOUND:
        return message.from_number
    return message.to


def build_threads(
    sent: Iterable[Message],
    received: Iterable[Message],
    partner: Optional[str] = None,
) -> List[ConversationThread]:
    """
    Group messages by counterparty, newest conversation first.

    Args:
        sent: Messages sent by the local number
        received: Messages received by the local number
        partner: Keep only the thread with this counterparty

    Returns:
        Threads ordered by the date_sent of their last message, descending.
        Messages inside a thread are ordered oldest first.
    """
    ordered = sorted([*sent, *received], key=lambda m: m.effective_date)

    groups: Dict[Optional[str], List[Message]] = {}
    for message in ordered:
        other = counterparty(message)
        if partner is not None and other != partner:
            continue
        groups.setdefault(other, []).append(message)

    threads = [
        ConversationThread.from_messages(participant, messages)
        for participant, messages in groups.items()
    ]
    # sorted() is stable, so ties keep first-appearance order
    return sorted(threads, key=lambda t: t.last_date_sent, reverse=True)
