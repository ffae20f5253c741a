from .base import Command, CommandContext
from .router import COMMANDS, get_command

__all__ = ["COMMANDS", "Command", "CommandContext", "get_command"]
