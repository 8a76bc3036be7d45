"""Health check del servicio."""

from fastapi import APIRouter, Depends

from workflow_copilot.config import Settings

from ..dependencies import get_app_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(settings: Settings = Depends(get_app_settings)):
    return {"status": "ok", "service": settings.service_name}
