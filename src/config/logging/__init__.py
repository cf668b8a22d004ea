"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="majic_breaches")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("search_completed", extra={"result_count": 3})

Campos obrigatórios em todo log: correlation_id, service, level, logger,
message, asctime. Nunca registrar tokens, chaves, assinaturas ou conteúdo
de vazamentos.
"""

from config.logging.config import configure_logging, get_logger, log_degraded
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "log_degraded",
]
