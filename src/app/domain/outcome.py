"""Resultado tipado da orquestração de busca.

SearchOutcome é uma união etiquetada: quem consome inspeciona o tipo
concreto (SearchCompleted ou SearchFailed) em vez de capturar exceções
que atravessam camadas.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from utils.errors import BreachLookupError


@dataclass(frozen=True, slots=True)
class SearchCompleted:
    """Busca concluída; result_count pode ser zero."""

    search_id: str
    result_count: int

    @property
    def succeeded(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class SearchFailed:
    """Chamada externa ou normalização falhou.

    O SearchRequest permanece persistido com result_count=0.
    """

    search_id: str
    error: BreachLookupError

    @property
    def succeeded(self) -> bool:
        return False


SearchOutcome = SearchCompleted | SearchFailed
