import argparse
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from twilio_sms.core.config.settings import TwilioSettings
from twilio_sms.core.utils.exceptions import UsageError
from twilio_sms.modules.channels.twilio.services.interfaces import MessagingProvider


class CommandArgumentParser(argparse.ArgumentParser):
    """
    ArgumentParser that raises UsageError instead of printing and exiting,
    so bad flags still end in a single failure envelope.
    """

    def __init__(self, prog: str):
        super().__init__(prog=prog, add_help=False, allow_abbrev=False)

    def error(self, message: str):
        raise UsageError(message)


@dataclass
class CommandContext:
    """Collaborators handed to every command handler."""

    twilio: TwilioSettings
    provider: MessagingProvider


@dataclass
class Command:
    name: str
    add_arguments: Callable[[argparse.ArgumentParser], None]
    handler: Callable[[argparse.Namespace, CommandContext], Dict[str, Any]]

    def execute(self, argv: List[str], context: CommandContext) -> Dict[str, Any]:
        parser = CommandArgumentParser(prog=self.name)
        self.add_arguments(parser)
        args = parser.parse_args(argv)
        return self.handler(args, context)
