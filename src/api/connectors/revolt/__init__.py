"""Connector Revolt: webhook da ponte autenticado por bearer token."""

from .message import (
    RevoltMessage,
    command_from_message,
    parse_command_text,
    parse_revolt_request,
    verify_bearer_token,
)

__all__ = [
    "RevoltMessage",
    "command_from_message",
    "parse_command_text",
    "parse_revolt_request",
    "verify_bearer_token",
]
