"""Settings específicas de Revolt.

O bot Revolt roda como processo separado e repassa mensagens para este
serviço via webhook autenticado por bearer token estático.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_COMMAND_PREFIX: str = "!breach"


@dataclass(frozen=True)
class RevoltSettings:
    """Configurações do canal Revolt.

    Attributes:
        webhook_token: Bearer token esperado no header Authorization
        command_prefix: Prefixo que identifica comandos do bot
        bot_id: ID do bot (link de convite)
    """

    webhook_token: str = ""
    command_prefix: str = DEFAULT_COMMAND_PREFIX
    bot_id: str = ""

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Revolt."""
        errors: list[str] = []
        if not self.webhook_token:
            errors.append("REVOLT_WEBHOOK_TOKEN não configurado")
        if not self.command_prefix.strip():
            errors.append("REVOLT_COMMAND_PREFIX não pode ser vazio")
        return errors


def _load_from_env() -> RevoltSettings:
    """Carrega RevoltSettings de variáveis de ambiente."""
    return RevoltSettings(
        webhook_token=os.getenv("REVOLT_WEBHOOK_TOKEN", ""),
        command_prefix=os.getenv("REVOLT_COMMAND_PREFIX", DEFAULT_COMMAND_PREFIX),
        bot_id=os.getenv("REVOLT_BOT_ID", ""),
    )


@lru_cache(maxsize=1)
def get_revolt_settings() -> RevoltSettings:
    """Retorna instância cacheada de RevoltSettings."""
    return _load_from_env()
