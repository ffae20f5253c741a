from typing import Dict

from twilio_sms.commands.base import Command
from twilio_sms.commands.messages import GET, LIST, SEND
from twilio_sms.commands.numbers import NUMBERS
from twilio_sms.commands.threads import THREADS
from twilio_sms.core.utils.exceptions import UsageError

COMMANDS: Dict[str, Command] = {
    command.name: command for command in (LIST, GET, THREADS, SEND, NUMBERS)
}


def get_command(name: str) -> Command:
    try:
        return COMMANDS[name]
    except KeyError:
        raise UsageError(
            f"Unknown command: {name}", details=f"Commands: {', '.join(COMMANDS)}"
        ) from None
