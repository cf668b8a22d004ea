"""Use cases de busca de vazamentos."""

from .search_breaches import SearchOrchestrator

__all__ = [
    "SearchOrchestrator",
]
