"""Verificação de assinatura Ed25519 para webhooks do Discord.

A mensagem assinada é ``timestamp.encode() + raw_body``. Qualquer falha
(hex malformado, tamanhos errados, assinatura inválida) resulta em False;
nenhuma exceção vaza para a rota e nada de chave/assinatura é logado.
"""

from __future__ import annotations

import binascii
import logging

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

SIGNATURE_SIZE = 64
PUBLIC_KEY_SIZE = 32


def _strict_unhex(value: str, expected_size: int) -> bytes | None:
    """Decodifica hex sem tolerar espaços, tamanho ímpar ou caracteres inválidos."""
    if not value or len(value) != expected_size * 2:
        return None
    try:
        decoded = binascii.unhexlify(value)
    except (binascii.Error, ValueError):
        return None
    return decoded if len(decoded) == expected_size else None


def verify_ed25519_signature(
    raw_body: bytes,
    signature_hex: str,
    timestamp: str,
    public_key_hex: str,
) -> bool:
    """Valida assinatura Ed25519 destacada.

    Args:
        raw_body: Corpo bruto da requisição
        signature_hex: Header X-Signature-Ed25519
        timestamp: Header X-Signature-Timestamp
        public_key_hex: Chave pública da aplicação (hex)

    Returns:
        True se assinatura válida
    """
    if not timestamp:
        return False

    signature = _strict_unhex(signature_hex, SIGNATURE_SIZE)
    key_bytes = _strict_unhex(public_key_hex, PUBLIC_KEY_SIZE)
    if signature is None or key_bytes is None:
        return False

    try:
        public_key = Ed25519PublicKey.from_public_bytes(key_bytes)
        public_key.verify(signature, timestamp.encode("utf-8") + raw_body)
    except (InvalidSignature, ValueError):
        return False
    return True


class SignatureVerifier:
    """Verificador ligado a uma chave pública configurada.

    Raises:
        ConfigurationError: Se a chave pública não foi configurada
    """

    def __init__(self, public_key_hex: str) -> None:
        if not public_key_hex:
            raise ConfigurationError("Discord public key not configured")
        self._public_key_hex = public_key_hex.strip()

    def verify(self, raw_body: bytes, signature_hex: str, timestamp: str) -> bool:
        valid = verify_ed25519_signature(raw_body, signature_hex, timestamp, self._public_key_hex)
        if not valid:
            logger.info("signature_rejected", extra={"body_size": len(raw_body)})
        return valid
