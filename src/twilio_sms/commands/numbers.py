import argparse
from typing import Any, Dict

from twilio_sms.commands.base import Command, CommandContext
from twilio_sms.modules.channels.twilio.services.message_normalizer import (
    normalize_phone_number,
)

DEFAULT_NUMBERS_LIMIT = 100


def add_numbers_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--limit", type=int, default=DEFAULT_NUMBERS_LIMIT, metavar="N")


def list_numbers(args: argparse.Namespace, context: CommandContext) -> Dict[str, Any]:
    records = context.provider.list_phone_numbers(limit=args.limit)
    return {"numbers": [normalize_phone_number(r).model_dump() for r in records]}


NUMBERS = Command("numbers", add_numbers_arguments, list_numbers)
