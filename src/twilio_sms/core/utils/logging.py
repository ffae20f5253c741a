"""
Logging utilities.
Configures structured logging for the CLI.

Log records always go to stderr: stdout is reserved for the single
result envelope printed per invocation.
"""

import logging
import os
import re
import sys
from typing import TYPE_CHECKING, Any, Dict, Optional

import colorama
import structlog

if TYPE_CHECKING:
    from twilio_sms.core.config.settings import LogSettings

# Regex patterns for PII
EMAIL_REGEX = re.compile(r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b')
PHONE_REGEX = re.compile(r'(?:\+)?\b[1-9]\d{7,14}\b')

ADDRESS_KEYS = ("phone", "number", "from", "to", "partner", "participant")


class PIIMaskingProcessor:
    """
    Structlog processor that masks emails everywhere and phone numbers
    in address-like keys.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def __call__(self, logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        if not self.enabled:
            return event_dict

        for key, value in event_dict.items():
            if not isinstance(value, str):
                continue
            value = EMAIL_REGEX.sub('[EMAIL_REDACTED]', value)
            # SIDs look numeric-ish enough to trip the phone pattern
            if 'sid' not in key.lower() and any(k in key.lower() for k in ADDRESS_KEYS):
                value = PHONE_REGEX.sub('[PHONE_REDACTED]', value)
            event_dict[key] = value
        return event_dict


# FORCE_COLOR=true keeps colours even when stderr is not a tty
force_color = os.getenv("FORCE_COLOR", "false").lower() == "true"
colorama.init(autoreset=True, strip=False if force_color else None)


class ColoredConsoleRenderer:
    """
    One line per event on stderr: level, logger, event, then key=value pairs.
    """

    LEVEL_STYLES = {
        'debug': colorama.Style.DIM,
        'info': colorama.Fore.GREEN,
        'warning': colorama.Fore.YELLOW,
        'error': colorama.Fore.RED,
        'critical': colorama.Fore.RED + colorama.Style.BRIGHT,
    }
    RESET = colorama.Style.RESET_ALL

    def __call__(self, logger, method_name, event_dict):
        level = event_dict.pop('level', method_name).lower()
        style = self.LEVEL_STYLES.get(level, '')
        head = f"{style}{level.upper():<8}{self.RESET}"

        timestamp = event_dict.pop('timestamp', None)
        name = event_dict.pop('logger', None)
        event = event_dict.pop('event', '')
        exception = event_dict.pop('exception', None)

        line = [timestamp, head] if timestamp else [head]
        if name:
            line.append(f"{colorama.Fore.MAGENTA}[{name}]{self.RESET}")
        line.append(str(event))
        line.extend(
            f"{colorama.Fore.CYAN}{key}{self.RESET}={value}"
            for key, value in event_dict.items()
        )

        rendered = ' '.join(line)
        if exception:
            rendered = f"{rendered}\n{exception}"
        return rendered


_configured = False


def configure_logging(log_settings: Optional["LogSettings"] = None):
    """
    Configure structured logging for the CLI.

    Args:
        log_settings: Logging settings (uses the global settings if None)
    """
    global _configured
    if _configured:
        return

    if log_settings is None:
        from twilio_sms.core.config import settings

        log_settings = settings.log

    shared_processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        PIIMaskingProcessor(enabled=log_settings.mask_pii),
    ]

    if log_settings.format.lower() == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = ColoredConsoleRenderer()

    structlog.configure(
        processors=shared_processors + [renderer],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_settings.level.upper(), logging.WARNING),
    )

    _configured = True


def get_logger(name: str) -> Any:
    """Structlog logger bound to `name`; configures logging on first use."""
    if not _configured:
        configure_logging()
    return structlog.get_logger(name)
