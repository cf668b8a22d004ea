"""Factories de stores e serviços baseadas em configuração de ambiente."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.leakosint import create_leakosint_client
from api.normalizers.leakosint import ResultNormalizer
from app.bootstrap.clients import create_async_redis_client
from app.coordinators.commands import CommandDispatcher
from app.infra.crypto import SignatureVerifier
from app.infra.stores import (
    MemoryBlobStore,
    MemoryBreachStore,
    RedisBlobStore,
    RedisBreachStore,
)
from app.services.channel_renderer import ChannelRenderer
from app.services.overflow_exporter import OverflowFileExporter
from app.use_cases.breaches import SearchOrchestrator
from config.logging import log_degraded
from config.settings import (
    get_base_settings,
    get_discord_settings,
    get_store_settings,
)
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from app.protocols.blob_store import BlobStoreProtocol
    from app.protocols.breach_store import BreachStoreProtocol

logger = logging.getLogger(__name__)


def create_breach_store() -> BreachStoreProtocol:
    """Cria store de buscas baseado na configuração."""
    settings = get_store_settings()

    if settings.backend == "redis":
        store = RedisBreachStore(create_async_redis_client())
        logger.info("breach_store_created", extra={"backend": "redis"})
        return store

    environment = get_base_settings().environment
    if environment not in ("development", "test"):
        logger.warning(
            "memory_store_in_non_dev",
            extra={"backend": "memory", "environment": environment},
        )
    logger.info("breach_store_created", extra={"backend": "memory"})
    return MemoryBreachStore()


def create_blob_store() -> BlobStoreProtocol:
    """Cria store de relatórios exportados."""
    settings = get_store_settings()

    if settings.backend == "redis":
        store = RedisBlobStore(create_async_redis_client(), ttl_seconds=settings.blob_ttl_seconds)
        logger.info("blob_store_created", extra={"backend": "redis"})
        return store

    logger.info("blob_store_created", extra={"backend": "memory"})
    return MemoryBlobStore(ttl_seconds=settings.blob_ttl_seconds)


def create_signature_verifier() -> SignatureVerifier | None:
    """Cria verificador Ed25519; None quando a chave não está configurada.

    Sem chave o webhook do Discord rejeita tudo com 401.
    """
    try:
        return SignatureVerifier(get_discord_settings().public_key)
    except ConfigurationError:
        log_degraded(logger, "discord_signature", reason="public_key_not_configured")
        return None


def blob_url_builder(blob_id: str) -> str | None:
    """URL pública do relatório (None se PUBLIC_BASE_URL ausente)."""
    return get_base_settings().public_url(f"/files/{blob_id}")


def create_channel_renderer(blob_store: BlobStoreProtocol) -> ChannelRenderer:
    exporter = OverflowFileExporter(blob_store, url_builder=blob_url_builder)
    return ChannelRenderer(exporter)


def create_search_orchestrator(
    store: BreachStoreProtocol,
    http_client: httpx.AsyncClient | None = None,
) -> SearchOrchestrator:
    """Cria orquestrador de busca.

    Raises:
        ConfigurationError: Se LEAKOSINT_API_TOKEN não estiver configurado
    """
    client = create_leakosint_client(http_client=http_client)
    return SearchOrchestrator(client=client, normalizer=ResultNormalizer(), store=store)


def create_command_dispatcher(
    store: BreachStoreProtocol,
    blob_store: BlobStoreProtocol,
    orchestrator_factory: Callable[[], SearchOrchestrator] | None = None,
) -> CommandDispatcher:
    """Cria dispatcher de comandos com factory lazy do orquestrador."""
    factory = orchestrator_factory or (lambda: create_search_orchestrator(store))
    return CommandDispatcher(
        orchestrator_factory=factory,
        store=store,
        renderer=create_channel_renderer(blob_store),
    )
