from fastapi import APIRouter, Depends

from app.api import deps
from app.core.config import Settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(settings: Settings = Depends(deps.get_settings)) -> dict[str, str]:
    return {"status": "ok", "service": settings.service_name}
