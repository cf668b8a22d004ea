"""Modelos de domínio para buscas de vazamentos.

Dataclasses imutáveis compartilhadas entre normalizer, use case,
renderer e stores. Nenhum modelo aqui conhece HTTP ou canais de chat.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any

# Valor de matched_field quando nenhum campo contém o termo buscado
UNKNOWN_MATCHED_FIELD = "unknown"


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """Registro de uma busca solicitada.

    Criado com result_count=0 e atualizado uma única vez com o total final.
    Nunca removido pelo core.
    """

    search_id: str
    query: str
    requested_limit: int
    timestamp_ms: int
    result_count: int = 0
    platform: str = "web"

    def with_result_count(self, result_count: int) -> SearchRequest:
        return replace(self, result_count=result_count)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SearchRequest:
        return cls(
            search_id=str(data["search_id"]),
            query=str(data["query"]),
            requested_limit=int(data["requested_limit"]),
            timestamp_ms=int(data["timestamp_ms"]),
            result_count=int(data.get("result_count", 0)),
            platform=str(data.get("platform", "web")),
        )


@dataclass(frozen=True, slots=True)
class NormalizedResult:
    """Um registro vazado individual, achatado a partir do payload bruto.

    Attributes:
        search_id: Busca à qual o resultado pertence
        source_name: Nome da fonte de vazamento
        source_description: Descrição livre da fonte (InfoLeak)
        matched_field: Último campo cujo valor contém a query, ou "unknown"
        data_type_names: Nomes dos campos na ordem de iteração do registro
        content: Linhas "campo: valor" unidas por quebra de linha
        breach_date: Data do vazamento, quando conhecida
    """

    search_id: str
    source_name: str
    source_description: str
    matched_field: str
    data_type_names: tuple[str, ...]
    content: str
    breach_date: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["data_type_names"] = list(self.data_type_names)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NormalizedResult:
        return cls(
            search_id=str(data["search_id"]),
            source_name=str(data["source_name"]),
            source_description=str(data.get("source_description", "")),
            matched_field=str(data.get("matched_field", UNKNOWN_MATCHED_FIELD)),
            data_type_names=tuple(data.get("data_type_names", ())),
            content=str(data.get("content", "")),
            breach_date=data.get("breach_date"),
        )

    def to_api_dict(self) -> dict[str, Any]:
        """Formato camelCase exposto pelos endpoints JSON."""
        return {
            "searchId": self.search_id,
            "breachName": self.source_name,
            "breachDescription": self.source_description,
            "breachDate": self.breach_date,
            "matchedField": self.matched_field,
            "dataTypes": list(self.data_type_names),
            "content": self.content,
        }


@dataclass(frozen=True, slots=True)
class Attachment:
    """Ponteiro para relatório exportado."""

    url: str
    filename: str


@dataclass(frozen=True, slots=True)
class RenderedMessage:
    """Corpo de mensagem pronto para um canal específico."""

    body_text: str
    truncated: bool = False
    attachment: Attachment | None = None


@dataclass(frozen=True, slots=True)
class BotStats:
    """Contadores agregados do store."""

    total_searches: int
    total_results: int

    def to_api_dict(self) -> dict[str, int]:
        return {"totalSearches": self.total_searches, "totalResults": self.total_results}


@dataclass(frozen=True, slots=True)
class StoredBlob:
    """Arquivo armazenado para download posterior."""

    blob_id: str
    filename: str
    content: bytes
    content_type: str = "text/plain; charset=utf-8"
