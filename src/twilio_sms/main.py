"""
twilio-sms: Twilio SMS/MMS command-line client.

Usage:
    twilio-sms <command> [options]

Commands:
    list     - List messages (--from, --to, --since, --until, --limit)
    get      - Get single message (--sid)
    threads  - List conversation threads (--my-number, --partner, --since, --limit)
    send     - Send SMS/MMS (--to, --body, --from, --messaging-service, --media-url)
    numbers  - List phone numbers owned by the account (--limit)

Environment:
    TWILIO_SID                    Account SID (required)
    TWILIO_TOKEN                  Auth token (required)
    TWILIO_DEFAULT_NUMBER         Default "from" number, E.164
    TWILIO_MESSAGING_SERVICE_SID  Default messaging service SID

Output is a single line of JSON on stdout: {"ok": true, "data": ...} with
exit status 0, or {"ok": false, "error", "code", "details"} with exit status 1.
"""

import sys
from typing import List, Optional, TextIO

from dotenv import load_dotenv

from twilio_sms.commands import CommandContext, get_command
from twilio_sms.core.cli import SuccessEnvelope, emit, handle_exception
from twilio_sms.core.config import Settings, settings
from twilio_sms.core.di import Container
from twilio_sms.core.utils import configure_logging, get_logger

logger = get_logger(__name__)


def run(
    argv: List[str],
    app_settings: Optional[Settings] = None,
    container: Optional[Container] = None,
    stream: Optional[TextIO] = None,
) -> int:
    """
    Run one command and print its result envelope.

    Args:
        argv: Command name followed by its flags
        app_settings: Settings to use (the environment-loaded ones if None)
        container: DI container (a fresh one if None)
        stream: Where the envelope is written (stdout if None)

    Returns:
        Exit status: 0 on success, 1 on any failure
    """
    app_settings = app_settings or settings
    configure_logging(app_settings.log)

    try:
        app_settings.twilio.require_credentials()
        command = get_command(argv[0] if argv else "")

        if container is None:
            container = Container()
        container.app_settings.override(app_settings)

        context = CommandContext(
            twilio=app_settings.twilio, provider=container.messaging_provider()
        )
        logger.debug("Running command", command=command.name)
        payload = command.execute(argv[1:], context)
    except Exception as exc:
        return emit(handle_exception(exc), stream)

    return emit(SuccessEnvelope(data=payload), stream)


def main() -> None:
    # Export .env into the process environment before settings are rebuilt
    load_dotenv()
    sys.exit(run(sys.argv[1:], app_settings=Settings()))


if __name__ == "__main__":
    main()
