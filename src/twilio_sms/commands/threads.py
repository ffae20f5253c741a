import argparse
from typing import Any, Dict

from twilio_sms.commands.base import Command, CommandContext
from twilio_sms.core.utils.exceptions import UsageError
from twilio_sms.modules.channels.twilio.services.message_normalizer import normalize_message
from twilio_sms.modules.channels.twilio.utils.helpers import parse_time
from twilio_sms.modules.conversation.services.thread_aggregator import build_threads

DEFAULT_THREADS_LIMIT = 200


def add_threads_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--my-number", dest="my_number", metavar="NUMBER")
    parser.add_argument("--partner", metavar="NUMBER")
    parser.add_argument("--since", metavar="DATE")
    parser.add_argument("--limit", type=int, default=DEFAULT_THREADS_LIMIT, metavar="N")


def list_threads(args: argparse.Namespace, context: CommandContext) -> Dict[str, Any]:
    """
    Rebuild conversations of the local number.

    The same `since` bound and limit apply to the sent and the received
    query; each is a single page of at most `limit` messages.
    """
    my_number = args.my_number or context.twilio.default_number
    if not my_number:
        raise UsageError("Missing --my-number or TWILIO_DEFAULT_NUMBER")

    since = parse_time(args.since, "--since")
    sent = context.provider.list_messages(
        from_number=my_number, date_sent_after=since, limit=args.limit
    )
    received = context.provider.list_messages(
        to_number=my_number, date_sent_after=since, limit=args.limit
    )

    threads = build_threads(
        [normalize_message(r) for r in sent],
        [normalize_message(r) for r in received],
        partner=args.partner,
    )
    return {"my_number": my_number, "threads": [t.to_output() for t in threads]}


THREADS = Command("threads", add_threads_arguments, list_threads)
