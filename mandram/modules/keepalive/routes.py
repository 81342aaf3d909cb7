from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from mandram.config import settings
from mandram.core.rate_limit import limiter
from mandram.database.supabase_client import get_service_supabase
from mandram.modules.keepalive.service import KeepaliveMode, KeepaliveService
from typing import Optional

router = APIRouter(prefix="/keepalive", tags=["keepalive"])


def get_keepalive_service() -> KeepaliveService:
    return KeepaliveService(get_service_supabase)


@router.get("")
@limiter.exempt
async def keepalive(
    mode: Optional[KeepaliveMode] = None,
    service: KeepaliveService = Depends(get_keepalive_service)
):
    """Touch the database; meant to be hit by a scheduler (cron) rather than users"""
    result = service.ping(mode or settings.keepalive_mode)
    content = result.model_dump(exclude_none=True)
    if not result.success:
        return JSONResponse(status_code=500, content=content)
    return content
