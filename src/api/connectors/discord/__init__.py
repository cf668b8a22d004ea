"""Connector Discord: Interactions webhook assinado com Ed25519."""

from .interaction import (
    EPHEMERAL_FLAG,
    INTERACTION_APPLICATION_COMMAND,
    INTERACTION_PING,
    RESPONSE_CHANNEL_MESSAGE,
    RESPONSE_PONG,
    Interaction,
    InteractionData,
    InteractionOption,
    command_from_interaction,
)

__all__ = [
    "EPHEMERAL_FLAG",
    "INTERACTION_APPLICATION_COMMAND",
    "INTERACTION_PING",
    "RESPONSE_CHANNEL_MESSAGE",
    "RESPONSE_PONG",
    "Interaction",
    "InteractionData",
    "InteractionOption",
    "command_from_interaction",
]
