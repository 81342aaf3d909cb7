from fastapi import APIRouter, Depends
from mandram.database.supabase_client import get_supabase
from mandram.modules.kanaiyazhi.service import KanaiyazhiService
from mandram.core.responses import passthrough
from supabase import Client
from typing import Optional

router = APIRouter(prefix="/kanaiyazhi", tags=["kanaiyazhi"])


def get_kanaiyazhi_service(supabase: Client = Depends(get_supabase)) -> KanaiyazhiService:
    return KanaiyazhiService(supabase)


@router.get("")
async def list_editions(
    year: Optional[int] = None,
    service: KanaiyazhiService = Depends(get_kanaiyazhi_service)
):
    if year is not None:
        return passthrough(service.fetch_editions_by_year(year))
    return passthrough(service.fetch_editions())


@router.get("/featured")
async def get_featured_edition(service: KanaiyazhiService = Depends(get_kanaiyazhi_service)):
    """Featured edition, or null when none is flagged"""
    return passthrough(service.fetch_featured_edition())
