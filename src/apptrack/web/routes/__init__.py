"""Aggregates all web route sub-routers."""

from fastapi import APIRouter

from apptrack.web.routes.exec import router as exec_router
from apptrack.web.routes.health import router as health_router

router = APIRouter()
router.include_router(exec_router)
router.include_router(health_router)
