"""Settings do store externo de buscas e relatórios."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

StoreBackend = Literal["memory", "redis"]


@dataclass(frozen=True)
class StoreSettings:
    """Configurações de persistência de buscas.

    Attributes:
        backend: Backend do store de buscas e blobs (memory|redis)
        blob_ttl_seconds: TTL dos relatórios exportados
    """

    backend: StoreBackend = "memory"
    blob_ttl_seconds: int = 7 * 24 * 3600

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações do store.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in ("memory", "redis"):
            errors.append(f"BREACH_STORE_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and base.is_production:
            errors.append("BREACH_STORE_BACKEND=memory proibido em production. Use Redis.")

        if self.backend == "redis" and not base.redis_url:
            errors.append("BREACH_STORE_BACKEND=redis requer REDIS_URL configurado")

        if self.blob_ttl_seconds <= 0:
            errors.append("BLOB_TTL_SECONDS deve ser > 0")

        return errors


def _load_store_from_env() -> StoreSettings:
    """Carrega StoreSettings de variáveis de ambiente."""
    backend_str = os.getenv("BREACH_STORE_BACKEND", "memory").lower()
    backend: StoreBackend = backend_str if backend_str in ("memory", "redis") else "memory"
    return StoreSettings(
        backend=backend,
        blob_ttl_seconds=int(os.getenv("BLOB_TTL_SECONDS", str(7 * 24 * 3600))),
    )


@lru_cache(maxsize=1)
def get_store_settings() -> StoreSettings:
    """Retorna instância cacheada de StoreSettings."""
    return _load_store_from_env()
