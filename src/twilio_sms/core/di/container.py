"""
Dependency Injection Container.
"""

from dependency_injector import containers, providers

from twilio_sms.core.config.settings import settings
from twilio_sms.modules.channels.twilio.services.twilio_service import (
    TwilioService,
    create_twilio_client,
)


class Container(containers.DeclarativeContainer):
    """
    Wires settings into the Twilio client and the messaging provider.

    The REST client is only built when a command first needs the
    provider, after the credentials have been checked.
    """

    app_settings = providers.Object(settings)

    twilio_client = providers.Singleton(
        create_twilio_client, twilio_settings=app_settings.provided.twilio
    )

    messaging_provider = providers.Factory(TwilioService, client=twilio_client)
