"""Settings específicas de Discord.

Configurações do canal Discord via Interactions Endpoint (webhook HTTP).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Headers enviados pelo Discord em cada interação
SIGNATURE_HEADER: str = "x-signature-ed25519"
TIMESTAMP_HEADER: str = "x-signature-timestamp"


@dataclass(frozen=True)
class DiscordSettings:
    """Configurações do canal Discord.

    Attributes:
        public_key: Chave pública Ed25519 da aplicação (hex)
        application_id: ID da aplicação Discord
        client_id: Client ID usado no link de convite
    """

    public_key: str = ""
    application_id: str = ""
    client_id: str = ""

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Discord."""
        errors: list[str] = []
        if not self.public_key:
            errors.append("DISCORD_PUBLIC_KEY não configurado")
        elif len(self.public_key) != 64:
            errors.append("DISCORD_PUBLIC_KEY deve ter 64 caracteres hex")
        return errors


def _load_from_env() -> DiscordSettings:
    """Carrega DiscordSettings de variáveis de ambiente."""
    return DiscordSettings(
        public_key=os.getenv("DISCORD_PUBLIC_KEY", "").strip(),
        application_id=os.getenv("DISCORD_APPLICATION_ID", ""),
        client_id=os.getenv("DISCORD_CLIENT_ID", ""),
    )


@lru_cache(maxsize=1)
def get_discord_settings() -> DiscordSettings:
    """Retorna instância cacheada de DiscordSettings."""
    return _load_from_env()
