"""Agregador de rotas: registra todos os routers por canal.

Este módulo é responsável por criar o router principal da API
e incluir todos os sub-routers de cada canal.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.discord.router import router as discord_router
from api.routes.health.router import router as health_router
from api.routes.revolt.router import router as revolt_router
from api.routes.search.router import router as search_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    # Busca web/API, downloads e relatórios
    api_router.include_router(search_router, tags=["search"])

    # Bots
    api_router.include_router(discord_router, prefix="/webhook/discord", tags=["discord"])
    api_router.include_router(revolt_router, prefix="/webhook/revolt", tags=["revolt"])

    return api_router
