from .exception_handlers import handle_exception
from .output import FailureEnvelope, SuccessEnvelope, emit

__all__ = ["FailureEnvelope", "SuccessEnvelope", "emit", "handle_exception"]
