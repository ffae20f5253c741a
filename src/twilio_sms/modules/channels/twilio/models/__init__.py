from .domain import Media, Message, PhoneNumber

__all__ = ["Media", "Message", "PhoneNumber"]
