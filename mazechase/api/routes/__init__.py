"""Versioned API route modules."""

from fastapi import APIRouter

from mazechase.api.routes.config import router as config_router
from mazechase.api.routes.control import router as control_router
from mazechase.api.routes.frame import router as frame_router
from mazechase.api.routes.map import router as map_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(map_router, tags=["Map"])
api_router.include_router(frame_router, tags=["Frame"])
api_router.include_router(control_router, tags=["Control"])
api_router.include_router(config_router, tags=["Config"])

__all__ = ["api_router"]
