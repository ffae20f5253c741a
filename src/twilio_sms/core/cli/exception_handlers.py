"""
Converts exceptions raised while running a command into failure envelopes.
"""

import traceback

from twilio.base.exceptions import TwilioRestException

from twilio_sms.core.cli.output import FailureEnvelope
from twilio_sms.core.utils.exceptions import AppError
from twilio_sms.core.utils.logging import get_logger

logger = get_logger(__name__)

TRACE_FRAMES = 3


def app_error_handler(exc: AppError) -> FailureEnvelope:
    """
    Handle usage, validation and configuration errors.
    """
    logger.warning("Command rejected", code=exc.code, error=exc.message)
    return FailureEnvelope(error=exc.message, code=exc.code, details=exc.details)


def twilio_exception_handler(exc: TwilioRestException) -> FailureEnvelope:
    """
    Handle errors returned by the Twilio API; message, code and details
    are reported verbatim.
    """
    logger.error(
        "Twilio request failed", error=exc.msg, error_code=exc.code, status=exc.status
    )
    code = str(exc.code) if exc.code is not None else ""
    return FailureEnvelope(error=exc.msg, code=code, details=exc.details)


def general_exception_handler(exc: Exception) -> FailureEnvelope:
    """
    Handle unexpected exceptions with a short backtrace excerpt.
    """
    logger.error("Unhandled exception", exc_info=exc)
    # innermost frame first
    frames = reversed(traceback.extract_tb(exc.__traceback__)[-TRACE_FRAMES:])
    excerpt = "\n".join(
        f"{frame.filename}:{frame.lineno}:in `{frame.name}'" for frame in frames
    )
    return FailureEnvelope(error=str(exc), code="ERROR", details=excerpt)


def handle_exception(exc: Exception) -> FailureEnvelope:
    if isinstance(exc, AppError):
        return app_error_handler(exc)
    if isinstance(exc, TwilioRestException):
        return twilio_exception_handler(exc)
    return general_exception_handler(exc)
