"""
Version 1 API routers, mounted under ``/api/v1``.
"""

from fastapi import APIRouter

from argo_explorer.api.v1.chat import router as chat_router
from argo_explorer.api.v1.export import router as export_router
from argo_explorer.api.v1.floats import router as floats_router
from argo_explorer.api.v1.measurements import router as measurements_router

router = APIRouter()
router.include_router(floats_router)
router.include_router(measurements_router)
router.include_router(chat_router)
router.include_router(export_router)

__all__ = ["router"]
