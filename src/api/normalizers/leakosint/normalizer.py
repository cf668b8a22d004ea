"""Normalização de fontes LeakOSINT para NormalizedResult.

Cada registro vira um resultado:
- content: linhas "campo: valor" na ordem de iteração do registro
- matched_field: ÚLTIMO campo cujo valor contém a query (case-insensitive)
- data_type_names: nomes dos campos, sem deduplicação

Função pura e idempotente: mesmo payload + query => mesma lista.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from app.domain.breach import UNKNOWN_MATCHED_FIELD, NormalizedResult

from .extractor import KnownSourceRecord, UnknownSourceRecord, classify_sources

logger = logging.getLogger(__name__)


def render_value(value: Any) -> str:
    """Converte valor para texto como a API o emitiu.

    None/booleanos seguem a grafia JSON (null/true/false), floats inteiros
    perdem o ".0" e listas viram itens separados por vírgula.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join("" if item is None else render_value(item) for item in value)
    if isinstance(value, Mapping):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def normalize_record(
    record: Mapping[str, Any],
    *,
    source: KnownSourceRecord,
    query_text: str,
    search_id: str = "",
) -> NormalizedResult:
    """Achata um registro individual."""
    needle = query_text.lower()
    lines: list[str] = []
    matched_field = ""

    for field_name, field_value in record.items():
        rendered = render_value(field_value)
        lines.append(f"{field_name}: {rendered}")
        if needle in rendered.lower():
            matched_field = str(field_name)

    return NormalizedResult(
        search_id=search_id,
        source_name=source.name,
        source_description=source.description,
        matched_field=matched_field or UNKNOWN_MATCHED_FIELD,
        data_type_names=tuple(str(name) for name in record),
        content="\n".join(lines).strip(),
    )


def normalize_results(
    payload: Mapping[str, Any],
    query_text: str,
    search_id: str = "",
) -> list[NormalizedResult]:
    """Achata o payload inteiro na ordem fonte -> registro.

    Args:
        payload: Mapeamento fonte -> descritor (campo "List" da API)
        query_text: Termo buscado, usado para detectar matched_field
        search_id: Busca dona dos resultados

    Returns:
        Lista de NormalizedResult (len == total de registros válidos)
    """
    results: list[NormalizedResult] = []
    for source in classify_sources(payload):
        if isinstance(source, UnknownSourceRecord):
            logger.warning(
                "leak_source_quarantined",
                extra={"source": source.name, "reason": source.reason},
            )
            continue
        for record in source.records:
            results.append(
                normalize_record(
                    record,
                    source=source,
                    query_text=query_text,
                    search_id=search_id,
                )
            )
    return results


class ResultNormalizer:
    """Adapter orientado a objeto para injeção no use case."""

    def normalize(
        self,
        payload: Mapping[str, Any],
        query_text: str,
        search_id: str = "",
    ) -> list[NormalizedResult]:
        return normalize_results(payload, query_text, search_id)
