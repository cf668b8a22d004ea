"""Webhook da ponte Revolt: bearer token estático + mensagem de chat.

O processo do bot Revolt repassa cada mensagem recebida; apenas as que
começam com o prefixo configurado viram Command.
"""

from __future__ import annotations

import hmac
import json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from api.connectors.webhook_errors import InvalidJsonError, InvalidSignatureError
from app.coordinators.commands.models import Command
from config.settings import get_leakosint_settings

if TYPE_CHECKING:
    from collections.abc import Mapping

MESSAGE_TYPE = "Message"
BEARER_PREFIX = "Bearer "


class RevoltMessage(BaseModel):
    """Mensagem repassada pela ponte."""

    model_config = ConfigDict(extra="ignore")

    type: str = MESSAGE_TYPE
    content: str | None = None
    author: Any = None
    channel: Any = None
    server: Any = None


def verify_bearer_token(authorization: str | None, expected_token: str) -> bool:
    """Compara o bearer token em tempo constante.

    Token esperado vazio nunca autentica.
    """
    if not expected_token or not authorization or not authorization.startswith(BEARER_PREFIX):
        return False
    provided = authorization[len(BEARER_PREFIX):].strip()
    return hmac.compare_digest(provided.encode("utf-8"), expected_token.encode("utf-8"))


def parse_revolt_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    expected_token: str,
) -> RevoltMessage:
    """Valida bearer token e parseia a mensagem.

    Raises:
        InvalidSignatureError: Token ausente ou divergente
        InvalidJsonError: JSON inválido ou fora do formato esperado
    """
    if not verify_bearer_token(headers.get("authorization"), expected_token):
        raise InvalidSignatureError("invalid_bearer_token")

    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    try:
        return RevoltMessage.model_validate(payload)
    except PydanticValidationError as exc:
        raise InvalidJsonError("invalid_message") from exc


def parse_command_text(content: str | None, prefix: str) -> Command | None:
    """Converte "<prefixo> <sub> <args...>" em Command.

    Returns:
        None se o texto (ausente ou vazio) não for comando do bot
    """
    if not content:
        return None
    text = content.strip()
    if not prefix or not text.startswith(prefix):
        return None
    remainder = text[len(prefix):]
    if remainder and not remainder[0].isspace():
        return None

    parts = remainder.split()
    name = parts[0] if parts else ""
    query = " ".join(parts[1:])
    return Command(name=name, query=query, limit=get_leakosint_settings().default_limit)


def command_from_message(message: RevoltMessage, prefix: str) -> Command | None:
    if message.type != MESSAGE_TYPE:
        return None
    return parse_command_text(message.content, prefix)
