from fastapi import APIRouter, Depends
from mandram.database.supabase_client import get_supabase
from mandram.modules.gallery.service import GalleryService
from mandram.core.responses import passthrough
from supabase import Client
from typing import Optional

router = APIRouter(prefix="/gallery", tags=["gallery"])


def get_gallery_service(supabase: Client = Depends(get_supabase)) -> GalleryService:
    return GalleryService(supabase)


@router.get("")
async def list_gallery_images(
    category: Optional[str] = None,
    event_id: Optional[str] = None,
    pongal: bool = False,
    service: GalleryService = Depends(get_gallery_service)
):
    """Gallery images; event_id wins over category, pongal selects the festival carousel set"""
    if pongal:
        return passthrough(service.fetch_pongal_images())
    if event_id:
        return passthrough(service.fetch_gallery_images_by_event(event_id))
    if category:
        return passthrough(service.fetch_gallery_images_by_category(category))
    return passthrough(service.fetch_gallery_images())
