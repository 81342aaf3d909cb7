from fastapi import APIRouter, Body, Depends
from mandram.database.supabase_client import get_supabase
from mandram.modules.team.service import TeamService
from mandram.core.responses import passthrough
from supabase import Client
from typing import Any, Dict, Optional

router = APIRouter(prefix="/team", tags=["team"])


def get_team_service(supabase: Client = Depends(get_supabase)) -> TeamService:
    return TeamService(supabase)


@router.get("")
async def list_team(
    office_bearers: Optional[bool] = None,
    year: Optional[int] = None,
    count: bool = False,
    service: TeamService = Depends(get_team_service)
):
    """List team members ordered by position, or just their count"""
    if count:
        return passthrough(service.count_team(office_bearers, year), count=True)
    return passthrough(service.fetch_team(office_bearers, year))


@router.post("")
async def create_team_member(
    body: Dict[str, Any] = Body(...),
    service: TeamService = Depends(get_team_service)
):
    """Insert a team member row as given and return it"""
    return passthrough(service.create_team_member(body))
