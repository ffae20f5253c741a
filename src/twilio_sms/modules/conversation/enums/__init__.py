from .message_direction import MessageDirection

__all__ = ["MessageDirection"]
