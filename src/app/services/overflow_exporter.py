"""Exportação de resultados para arquivo quando o corpo não comporta tudo.

Monta o relatório completo em texto plano, grava no blob store e devolve
o ponteiro (URL + nome do arquivo). Sem URL pública configurada, o
relatório é gravado mas nenhum Attachment é retornado.
"""

from __future__ import annotations

import logging
import re
import time
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.domain.breach import Attachment
from app.services.report_formats import render_text_report
from config.logging import log_degraded

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from app.domain.breach import NormalizedResult
    from app.protocols.blob_store import BlobStoreProtocol

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9]")


def build_report_filename(query_text: str, timestamp_ms: int | None = None) -> str:
    """breach_search_<query sanitizada>_<epoch ms>.txt"""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    safe_query = _UNSAFE_FILENAME_CHARS.sub("_", query_text)
    return f"breach_search_{safe_query}_{timestamp_ms}.txt"


class OverflowFileExporter:
    """Exporta relatório completo para o blob store.

    Args:
        blob_store: Destino dos relatórios
        url_builder: Converte blob_id em URL pública (None se indisponível)
    """

    def __init__(
        self,
        blob_store: BlobStoreProtocol,
        url_builder: Callable[[str], str | None],
    ) -> None:
        self._blob_store = blob_store
        self._url_builder = url_builder

    async def export(
        self,
        results: Sequence[NormalizedResult],
        query_text: str,
        result_count: int,
    ) -> Attachment | None:
        generated_at = datetime.now(tz=UTC)
        report = render_text_report(results, query_text, result_count, generated_at)
        filename = build_report_filename(query_text, int(generated_at.timestamp() * 1000))

        blob_id = await self._blob_store.put(
            report.encode("utf-8"),
            filename=filename,
            content_type="text/plain; charset=utf-8",
        )
        url = self._url_builder(blob_id)
        logger.info(
            "overflow_report_exported",
            extra={"blob_id": blob_id, "result_count": result_count, "has_url": bool(url)},
        )
        if not url:
            log_degraded(
                logger, "overflow_exporter", reason="public_url_unavailable", blob_id=blob_id
            )
            return None
        return Attachment(url=url, filename=filename)
