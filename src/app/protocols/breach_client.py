"""Protocolos do cliente de consulta e do normalizer de resultados.

Evita dependência direta da camada api dentro do use case.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.breach import NormalizedResult


class BreachQueryClientProtocol(Protocol):
    """Contrato mínimo para a chamada ao serviço de vazamentos."""

    async def query(self, query_text: str, limit: int = 100) -> dict[str, Any]: ...


class ResultNormalizerProtocol(Protocol):
    """Contrato mínimo para achatar o payload bruto."""

    def normalize(
        self,
        payload: dict[str, Any],
        query_text: str,
        search_id: str = "",
    ) -> list[NormalizedResult]: ...
