"""Extrator de fontes do payload LeakOSINT.

Estrutura esperada (campo "List" da resposta):
    {<fonte>: {"InfoLeak": str, "Data": [{campo: valor, ...}, ...]}, ...}

Não faz validação de negócio - apenas classificação estrutural. Fontes
com formato inesperado viram UnknownSourceRecord e não seguem adiante.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from api.connectors.leakosint import NO_RESULTS_SOURCE

logger = logging.getLogger(__name__)

DESCRIPTION_FIELD = "InfoLeak"
DATA_FIELD = "Data"


@dataclass(frozen=True, slots=True)
class KnownSourceRecord:
    """Fonte no formato esperado.

    records contém apenas registros que são mapeamentos campo -> valor.
    """

    name: str
    description: str
    records: tuple[Mapping[str, Any], ...]


@dataclass(frozen=True, slots=True)
class UnknownSourceRecord:
    """Fonte em quarentena (formato não reconhecido)."""

    name: str
    reason: str


SourceRecord = KnownSourceRecord | UnknownSourceRecord


def _classify_source(name: str, descriptor: Any) -> SourceRecord:
    if not isinstance(descriptor, Mapping):
        return UnknownSourceRecord(name=name, reason="descriptor_not_mapping")

    data = descriptor.get(DATA_FIELD)
    if data is None:
        data = []
    if not isinstance(data, list):
        return UnknownSourceRecord(name=name, reason="data_not_list")

    records: list[Mapping[str, Any]] = []
    for index, record in enumerate(data):
        if isinstance(record, Mapping):
            records.append(record)
        else:
            logger.warning(
                "leak_record_quarantined",
                extra={"source": name, "index": index, "reason": "record_not_mapping"},
            )

    description = descriptor.get(DESCRIPTION_FIELD)
    return KnownSourceRecord(
        name=name,
        description=description if isinstance(description, str) else "",
        records=tuple(records),
    )


def classify_sources(payload: Mapping[str, Any] | Any) -> list[SourceRecord]:
    """Classifica as fontes do payload preservando a ordem de iteração.

    A fonte sentinela "No results found" é descartada.

    Returns:
        Lista de KnownSourceRecord/UnknownSourceRecord
    """
    if not isinstance(payload, Mapping):
        logger.warning("leak_payload_quarantined", extra={"reason": "payload_not_mapping"})
        return []

    sources: list[SourceRecord] = []
    for name, descriptor in payload.items():
        if name == NO_RESULTS_SOURCE:
            continue
        sources.append(_classify_source(str(name), descriptor))
    return sources
