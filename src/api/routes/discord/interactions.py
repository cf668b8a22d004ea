"""Endpoint de Interactions do Discord.

Endpoint:
- POST /webhook/discord/interactions

Fluxo:
1. Valida assinatura Ed25519 (X-Signature-Ed25519 + X-Signature-Timestamp)
2. type 1 (PING) -> {"type": 1}
3. type 2 (comando) -> dispatcher -> mensagem efêmera (type 4, flags 64)

Segurança:
- Toda falha de verificação responde 401 idêntico, inclusive chave ausente
- Nenhum comando roda antes da assinatura ser aceita
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status

from api.connectors.discord import command_from_interaction
from api.connectors.discord.webhook import parse_interaction_request
from api.connectors.webhook_errors import InvalidJsonError
from api.payload_builders.discord import build_message_response, build_pong_response
from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.services.channel_profiles import DISCORD_PROFILE
from utils.errors import AuthenticationError

logger = logging.getLogger(__name__)

router = APIRouter()


def _plain(content: str, status_code: int) -> Response:
    return Response(content=content, media_type="text/plain", status_code=status_code)


@router.post("/interactions", response_model=None)
async def receive_interaction(request: Request) -> Response | dict[str, Any]:
    """Recebe interaction assinada do Discord."""
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        from app.bootstrap import get_command_dispatcher, get_signature_verifier

        raw_body = await request.body()
        try:
            interaction = parse_interaction_request(
                raw_body, request.headers, get_signature_verifier()
            )
        except AuthenticationError as exc:
            logger.warning(
                "webhook_signature_invalid",
                extra={
                    "channel": "discord",
                    "correlation_id": get_correlation_id(),
                    "error": str(exc),
                },
            )
            return _plain("Unauthorized", status.HTTP_401_UNAUTHORIZED)
        except InvalidJsonError as exc:
            logger.warning(
                "webhook_json_invalid",
                extra={
                    "channel": "discord",
                    "correlation_id": get_correlation_id(),
                    "error": str(exc),
                },
            )
            return _plain("Bad Request", status.HTTP_400_BAD_REQUEST)

        if interaction.is_ping:
            logger.info("discord_ping_received", extra={"channel": "discord"})
            return build_pong_response()

        if not interaction.is_command:
            logger.info(
                "discord_interaction_unsupported",
                extra={"channel": "discord", "interaction_type": interaction.type},
            )
            return _plain("Bad Request", status.HTTP_400_BAD_REQUEST)

        command = command_from_interaction(interaction)
        reply = await get_command_dispatcher().dispatch(command, DISCORD_PROFILE)
        return build_message_response(reply.content)
    finally:
        reset_correlation_id(token)
