from fastapi import APIRouter, Body, Depends
from mandram.database.supabase_client import get_supabase
from mandram.modules.events.service import EventService
from mandram.core.responses import passthrough
from supabase import Client
from typing import Any, Dict, Optional

router = APIRouter(prefix="/events", tags=["events"])


def get_event_service(supabase: Client = Depends(get_supabase)) -> EventService:
    return EventService(supabase)


@router.get("")
async def list_events(
    featured: Optional[bool] = None,
    category: Optional[str] = None,
    count: bool = False,
    service: EventService = Depends(get_event_service)
):
    """List events ordered by date, or just their count"""
    if count:
        return passthrough(service.count_events(featured, category), count=True)
    return passthrough(service.fetch_events(featured, category))


@router.post("")
async def create_event(
    body: Dict[str, Any] = Body(...),
    service: EventService = Depends(get_event_service)
):
    """Insert an event row as given and return it"""
    return passthrough(service.create_event(body))
