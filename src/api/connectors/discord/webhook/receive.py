"""Validação de assinatura e parse do webhook de Interactions."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pydantic import ValidationError as PydanticValidationError

from api.connectors.discord.interaction import Interaction
from api.connectors.webhook_errors import InvalidJsonError, InvalidSignatureError
from config.settings.discord import SIGNATURE_HEADER, TIMESTAMP_HEADER

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.infra.crypto import SignatureVerifier


def parse_interaction_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    verifier: SignatureVerifier | None,
) -> Interaction:
    """Valida assinatura Ed25519 e parseia a interaction.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        verifier: Verificador configurado (None = chave ausente)

    Raises:
        InvalidSignatureError: Chave ausente, headers ausentes ou assinatura inválida
        InvalidJsonError: JSON inválido ou fora do formato de interaction

    Returns:
        Interaction validada
    """
    if verifier is None:
        raise InvalidSignatureError("public_key_not_configured")

    signature = headers.get(SIGNATURE_HEADER) or ""
    timestamp = headers.get(TIMESTAMP_HEADER) or ""
    if not signature or not timestamp:
        raise InvalidSignatureError("missing_signature_headers")

    if not verifier.verify(raw_body, signature, timestamp):
        raise InvalidSignatureError("invalid_signature")

    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    try:
        return Interaction.model_validate(payload)
    except PydanticValidationError as exc:
        raise InvalidJsonError("invalid_interaction") from exc
