"""Protocolos de domínio para o store de buscas.

O store é um colaborador externo (key-value) com contrato estreito.
Exige durabilidade e read-your-writes: o use case cria a busca e,
na mesma requisição, os canais leem os resultados pelo search_id.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.breach import BotStats, NormalizedResult, SearchRequest


class BreachStoreProtocol(ABC):
    """Contrato assíncrono para persistência de buscas e resultados."""

    @abstractmethod
    async def create_search(self, query: str, limit: int, *, platform: str = "web") -> SearchRequest:
        """Cria SearchRequest com result_count=0 e retorna o registro criado."""

    @abstractmethod
    async def update_search_count(self, search_id: str, result_count: int) -> None:
        """Atualiza o total final de resultados da busca.

        Raises:
            KeyError: Se a busca não existir.
        """

    @abstractmethod
    async def add_results(self, results: Sequence[NormalizedResult]) -> None:
        """Persiste resultados preservando a ordem recebida."""

    @abstractmethod
    async def get_search(self, search_id: str) -> SearchRequest | None:
        """Retorna a busca ou None."""

    @abstractmethod
    async def get_results(self, search_id: str) -> list[NormalizedResult]:
        """Retorna resultados da busca na ordem de inserção."""

    @abstractmethod
    async def get_stats(self) -> BotStats:
        """Retorna contadores agregados (buscas e resultados)."""

    async def ping(self) -> bool:
        """Verifica disponibilidade do backend (readiness)."""
        return True
