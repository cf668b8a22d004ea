"""Coordenação de comandos de bot."""

from .dispatcher import CommandDispatcher, format_error, help_text
from .models import Command, CommandReply

__all__ = [
    "Command",
    "CommandDispatcher",
    "CommandReply",
    "format_error",
    "help_text",
]
