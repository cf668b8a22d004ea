"""Protocolo para armazenamento de relatórios exportados."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.breach import StoredBlob


class BlobStoreProtocol(ABC):
    """Contrato assíncrono para blobs recuperáveis por ID."""

    @abstractmethod
    async def put(
        self,
        content: bytes,
        *,
        filename: str,
        content_type: str = "text/plain; charset=utf-8",
    ) -> str:
        """Armazena o conteúdo e retorna o blob_id gerado."""

    @abstractmethod
    async def get(self, blob_id: str) -> StoredBlob | None:
        """Retorna o blob ou None se inexistente/expirado."""
