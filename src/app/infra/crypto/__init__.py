"""Criptografia de borda: verificação de assinaturas de webhooks.

Localizado em app/infra/ para manter boundaries corretas:
- app/ não importa de api/ (exceto via bootstrap)
- api/routes recebe o verificador já construído pelo bootstrap
"""

from .signature import (
    PUBLIC_KEY_SIZE,
    SIGNATURE_SIZE,
    SignatureVerifier,
    verify_ed25519_signature,
)

__all__ = [
    "PUBLIC_KEY_SIZE",
    "SIGNATURE_SIZE",
    "SignatureVerifier",
    "verify_ed25519_signature",
]
