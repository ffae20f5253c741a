"""
Message commands: list, get and send.
"""

import argparse
from typing import Any, Dict

from twilio_sms.commands.base import Command, CommandContext
from twilio_sms.core.utils import get_logger
from twilio_sms.core.utils.exceptions import InputValidationError, UsageError
from twilio_sms.modules.channels.twilio.services.message_normalizer import (
    normalize_media,
    normalize_message,
)
from twilio_sms.modules.channels.twilio.utils.helpers import parse_time

logger = get_logger(__name__)

DEFAULT_LIST_LIMIT = 50
MAX_MEDIA_URLS = 10


def add_list_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--from", dest="from_number", metavar="NUMBER")
    parser.add_argument("--to", dest="to_number", metavar="NUMBER")
    parser.add_argument("--since", metavar="DATE")
    parser.add_argument("--until", metavar="DATE")
    parser.add_argument("--limit", type=int, default=DEFAULT_LIST_LIMIT, metavar="N")


def list_messages(args: argparse.Namespace, context: CommandContext) -> Dict[str, Any]:
    records = context.provider.list_messages(
        from_number=args.from_number,
        to_number=args.to_number,
        date_sent_after=parse_time(args.since, "--since"),
        date_sent_before=parse_time(args.until, "--until"),
        limit=args.limit,
    )
    return {"messages": [normalize_message(r).to_output() for r in records]}


def add_get_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--sid", metavar="SID")


def get_message(args: argparse.Namespace, context: CommandContext) -> Dict[str, Any]:
    if not args.sid:
        raise UsageError("Missing --sid")

    message = normalize_message(context.provider.fetch_message(args.sid))
    if message.num_media > 0:
        media = normalize_media(
            context.provider.list_media(args.sid), context.twilio.api_base_url
        )
        message = message.model_copy(update={"media": media})
    return message.to_output()


def add_send_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--to", dest="to_number", metavar="NUMBER")
    parser.add_argument("--body", metavar="TEXT")
    parser.add_argument("--from", dest="from_number", metavar="NUMBER")
    parser.add_argument("--messaging-service", dest="messaging_service", metavar="SID")
    parser.add_argument(
        "--media-url", dest="media_urls", action="append", default=[], metavar="URL"
    )


def send_message(args: argparse.Namespace, context: CommandContext) -> Dict[str, Any]:
    if not args.to_number:
        raise UsageError("Missing --to")
    if args.body is None and not args.media_urls:
        raise UsageError("Missing --body or --media-url")
    if len(args.media_urls) > MAX_MEDIA_URLS:
        raise InputValidationError(f"Max {MAX_MEDIA_URLS} media URLs allowed")

    messaging_service_sid = args.messaging_service or context.twilio.messaging_service_sid
    from_number = args.from_number or context.twilio.default_number
    if not (messaging_service_sid or from_number):
        raise UsageError(
            "Missing --from, --messaging-service, TWILIO_DEFAULT_NUMBER, "
            "or TWILIO_MESSAGING_SERVICE_SID"
        )

    # Messaging service is preferred (A2P 10DLC) unless --from was given explicitly
    if messaging_service_sid and not args.from_number:
        logger.debug("Sending via messaging service", messaging_service_sid=messaging_service_sid)
        record = context.provider.create_message(
            to_number=args.to_number,
            body=args.body,
            media_urls=args.media_urls or None,
            messaging_service_sid=messaging_service_sid,
        )
    else:
        logger.debug("Sending from number", from_number=from_number)
        record = context.provider.create_message(
            to_number=args.to_number,
            body=args.body,
            media_urls=args.media_urls or None,
            from_number=from_number,
        )
    return normalize_message(record).to_output()


LIST = Command("list", add_list_arguments, list_messages)
GET = Command("get", add_get_arguments, get_message)
SEND = Command("send", add_send_arguments, send_message)
