"""Settings base do Majic Breaches.

Configurações comuns a todos os canais e serviços.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs e tracing
        debug: Modo debug ativo
        public_base_url: URL pública do serviço (links de relatórios)
        redis_url: URL de conexão Redis
    """

    # Ambiente
    environment: Environment = "development"
    service_name: str = "majic-breaches"
    debug: bool = False

    # URL usada para montar links de download enviados aos chats
    public_base_url: str = ""

    # Redis
    redis_url: str = ""

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment == "development"

    def public_url(self, path: str) -> str | None:
        """Monta URL pública absoluta para o path informado.

        Returns:
            URL completa ou None se PUBLIC_BASE_URL não configurado.
        """
        if not self.public_base_url:
            return None
        return f"{self.public_base_url.rstrip('/')}/{path.lstrip('/')}"

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        valid_envs = {"development", "staging", "production"}
        if self.environment not in valid_envs:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if self.public_base_url and not self.public_base_url.startswith(("http://", "https://")):
            errors.append("PUBLIC_BASE_URL deve começar com http:// ou https://")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "majic-breaches"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        public_base_url=os.getenv("PUBLIC_BASE_URL", ""),
        redis_url=os.getenv("REDIS_URL", ""),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
