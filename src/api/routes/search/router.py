"""Router de busca web/API: agrega endpoints de consulta e download."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.search.api import router as api_router
from api.routes.search.download import router as download_router
from api.routes.search.files import router as files_router

router = APIRouter()

router.include_router(api_router, prefix="/api")
router.include_router(download_router)
router.include_router(files_router)
