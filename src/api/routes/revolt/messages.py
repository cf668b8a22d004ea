"""Endpoint da ponte Revolt.

Endpoint:
- POST /webhook/revolt/messages

O processo do bot Revolt repassa mensagens com Authorization: Bearer.
Mensagens sem o prefixo de comando respondem {"content": null}.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from fastapi import APIRouter, Request, Response, status

from api.connectors.revolt import command_from_message, parse_revolt_request
from api.connectors.webhook_errors import InvalidJsonError
from api.payload_builders.revolt import build_ignored_reply, build_revolt_reply
from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.services.channel_profiles import REVOLT_PROFILE
from config.settings import get_revolt_settings
from utils.errors import AuthenticationError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/messages", response_model=None)
async def receive_message(request: Request) -> Response | dict[str, Any]:
    """Recebe mensagem repassada pela ponte Revolt."""
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        from app.bootstrap import get_command_dispatcher

        settings = get_revolt_settings()
        raw_body = await request.body()
        try:
            message = parse_revolt_request(raw_body, request.headers, settings.webhook_token)
        except AuthenticationError:
            logger.warning(
                "webhook_token_invalid",
                extra={"channel": "revolt", "correlation_id": get_correlation_id()},
            )
            return Response(
                content="Unauthorized",
                media_type="text/plain",
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        except InvalidJsonError as exc:
            logger.warning(
                "webhook_json_invalid",
                extra={
                    "channel": "revolt",
                    "correlation_id": get_correlation_id(),
                    "error": str(exc),
                },
            )
            return Response(
                content="Bad Request",
                media_type="text/plain",
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        command = command_from_message(message, settings.command_prefix)
        if command is None:
            return build_ignored_reply()

        profile = REVOLT_PROFILE
        if settings.command_prefix.strip() != profile.command_prefix.strip():
            profile = replace(profile, command_prefix=f"{settings.command_prefix.strip()} ")

        reply = await get_command_dispatcher().dispatch(command, profile)
        return build_revolt_reply(reply)
    finally:
        reset_correlation_id(token)
