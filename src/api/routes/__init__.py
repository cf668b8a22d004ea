"""Rotas HTTP da API: adapters de entrada por canal.

Responsabilidades:
- Definir endpoints HTTP (webhooks, busca, health)
- Validação inicial de request (headers, query params)
- Delegação para connectors/coordinators/use_cases
- Respostas HTTP apropriadas

Estrutura por canal:
- routes/discord/: Interactions webhook
- routes/revolt/: webhook da ponte Revolt
- routes/search/: busca JSON, download e relatórios
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
