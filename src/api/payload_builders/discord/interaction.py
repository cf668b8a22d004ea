"""Respostas de Interactions: PONG e mensagem efêmera."""

from __future__ import annotations

from typing import Any

from api.connectors.discord import EPHEMERAL_FLAG, RESPONSE_CHANNEL_MESSAGE, RESPONSE_PONG

# Teto da plataforma para content
DISCORD_MAX_CONTENT = 2000


def build_pong_response() -> dict[str, Any]:
    return {"type": RESPONSE_PONG}


def build_message_response(content: str) -> dict[str, Any]:
    """Mensagem efêmera (flags=64) visível só para quem invocou."""
    return {
        "type": RESPONSE_CHANNEL_MESSAGE,
        "data": {
            "content": content[:DISCORD_MAX_CONTENT],
            "flags": EPHEMERAL_FLAG,
        },
    }
