from .interfaces import MessagingProvider
from .twilio_service import TwilioService, create_twilio_client

__all__ = ["MessagingProvider", "TwilioService", "create_twilio_client"]
