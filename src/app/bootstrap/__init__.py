"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, inicializa
dependências e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_command_dispatcher

    # Na inicialização do serviço
    initialize_app()

    # Obter dependências
    dispatcher = get_command_dispatcher()
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_discord_settings,
    get_leakosint_settings,
    get_revolt_settings,
    get_store_settings,
)

if TYPE_CHECKING:
    from app.coordinators.commands import CommandDispatcher
    from app.infra.crypto import SignatureVerifier
    from app.protocols.blob_store import BlobStoreProtocol
    from app.protocols.breach_store import BreachStoreProtocol
    from app.use_cases.breaches import SearchOrchestrator

# Nome do serviço para logs
SERVICE_NAME = "majic_breaches"

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (nível DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development`/`test` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    environment = base.environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"store: {error}" for error in get_store_settings().validate(base))
    errors.extend(f"leakosint: {error}" for error in get_leakosint_settings().validate())
    errors.extend(f"discord: {error}" for error in get_discord_settings().validate())
    errors.extend(f"revolt: {error}" for error in get_revolt_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Getters (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_breach_store() -> BreachStoreProtocol:
    """Obtém store de buscas (singleton)."""
    from app.bootstrap.dependencies import create_breach_store
    return create_breach_store()


@lru_cache(maxsize=1)
def get_blob_store() -> BlobStoreProtocol:
    """Obtém store de relatórios (singleton)."""
    from app.bootstrap.dependencies import create_blob_store
    return create_blob_store()


@lru_cache(maxsize=1)
def get_signature_verifier() -> SignatureVerifier | None:
    """Obtém verificador Ed25519 do Discord (None se chave ausente)."""
    from app.bootstrap.dependencies import create_signature_verifier
    return create_signature_verifier()


@lru_cache(maxsize=1)
def get_command_dispatcher() -> CommandDispatcher:
    """Obtém dispatcher de comandos (singleton)."""
    from app.bootstrap.dependencies import create_command_dispatcher
    return create_command_dispatcher(get_breach_store(), get_blob_store())


def get_search_orchestrator() -> SearchOrchestrator:
    """Cria orquestrador ligado ao store compartilhado.

    Raises:
        ConfigurationError: Se LEAKOSINT_API_TOKEN não estiver configurado
    """
    from app.bootstrap.dependencies import create_search_orchestrator
    return create_search_orchestrator(get_breach_store())


def reset_dependencies() -> None:
    """Limpa caches de settings e singletons (testes)."""
    from app.bootstrap.clients import create_async_redis_client

    for getter in (
        get_base_settings,
        get_store_settings,
        get_leakosint_settings,
        get_discord_settings,
        get_revolt_settings,
        get_breach_store,
        get_blob_store,
        get_signature_verifier,
        get_command_dispatcher,
        create_async_redis_client,
    ):
        getter.cache_clear()
