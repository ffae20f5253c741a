from .settings import LogSettings, Settings, TwilioSettings, settings

__all__ = ["settings", "Settings", "TwilioSettings", "LogSettings"]
