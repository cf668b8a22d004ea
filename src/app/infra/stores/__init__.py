"""Stores: implementações concretas de persistência.

Módulos disponíveis:
    - memory_stores: Stores em memória para desenvolvimento/testes
    - redis_breach_store: Buscas, resultados e relatórios em Redis
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryBlobStore, MemoryBreachStore
from app.infra.stores.redis_breach_store import RedisBlobStore, RedisBreachStore

__all__ = [
    # Memory (dev/test)
    "MemoryBlobStore",
    "MemoryBreachStore",
    # Redis
    "RedisBlobStore",
    "RedisBreachStore",
]
