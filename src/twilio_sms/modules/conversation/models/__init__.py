from .thread import ConversationThread

__all__ = ["ConversationThread"]
