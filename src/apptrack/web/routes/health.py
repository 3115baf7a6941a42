"""Liveness probe."""

from fastapi import APIRouter, Depends

from apptrack.config import AppConfig
from apptrack.web.deps import get_config

router = APIRouter()


@router.get("/health")
async def health(config: AppConfig = Depends(get_config)):
    return {"status": "ok", "storage": config.storage.backend}
