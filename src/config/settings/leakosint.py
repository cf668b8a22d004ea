"""Settings específicas da API LeakOSINT.

Configurações do serviço externo de consulta de vazamentos.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

LEAKOSINT_API_URL: str = "https://leakosintapi.com/"
DEFAULT_SEARCH_LIMIT: int = 100


@dataclass(frozen=True)
class LeakOsintSettings:
    """Configurações da API LeakOSINT.

    Attributes:
        api_token: Token de acesso (obrigatório para buscas)
        api_url: Endpoint único da API
        request_timeout_seconds: Timeout da chamada HTTP
        default_limit: Limite de resultados quando o chamador não informa
        lang: Idioma das descrições retornadas
    """

    api_token: str = ""
    api_url: str = LEAKOSINT_API_URL
    request_timeout_seconds: float = 30.0
    default_limit: int = DEFAULT_SEARCH_LIMIT
    lang: str = "en"

    def validate(self) -> list[str]:
        """Valida configurações mínimas da LeakOSINT.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_token:
            errors.append("LEAKOSINT_API_TOKEN não configurado")

        if not self.api_url.startswith(("http://", "https://")):
            errors.append("LEAKOSINT_API_URL deve ser http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("LEAKOSINT_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.default_limit <= 0:
            errors.append("LEAKOSINT_DEFAULT_LIMIT deve ser > 0")

        return errors


def _load_from_env() -> LeakOsintSettings:
    """Carrega LeakOsintSettings a partir de variáveis de ambiente."""
    return LeakOsintSettings(
        api_token=os.getenv("LEAKOSINT_API_TOKEN", ""),
        api_url=os.getenv("LEAKOSINT_API_URL", LEAKOSINT_API_URL),
        request_timeout_seconds=float(
            os.getenv("LEAKOSINT_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        default_limit=int(os.getenv("LEAKOSINT_DEFAULT_LIMIT", str(DEFAULT_SEARCH_LIMIT))),
        lang=os.getenv("LEAKOSINT_LANG", "en"),
    )


@lru_cache(maxsize=1)
def get_leakosint_settings() -> LeakOsintSettings:
    """Retorna instância cacheada de LeakOsintSettings."""
    return _load_from_env()
