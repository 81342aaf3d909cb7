from fastapi import APIRouter, Depends
from mandram.database.supabase_client import get_supabase
from mandram.modules.achievements.service import AchievementService
from mandram.core.responses import passthrough
from supabase import Client
from typing import Optional

router = APIRouter(prefix="/achievements", tags=["achievements"])


def get_achievement_service(supabase: Client = Depends(get_supabase)) -> AchievementService:
    return AchievementService(supabase)


@router.get("")
async def list_achievements(
    category: Optional[str] = None,
    service: AchievementService = Depends(get_achievement_service)
):
    if category:
        return passthrough(service.fetch_achievements_by_category(category))
    return passthrough(service.fetch_achievements())
