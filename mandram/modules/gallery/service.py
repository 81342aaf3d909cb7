from supabase import Client
from mandram.modules.gallery.schemas import GalleryImage
from mandram.core.queries import execute_rows
from mandram.core.result import Result
from typing import List

TABLE = "gallery_images"


class GalleryService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _ordered(self, query):
        # display_order first (unset last), newest upload breaks ties
        return query.order("display_order", nullsfirst=False)\
            .order("created_at", desc=True)

    def fetch_gallery_images(self) -> Result[List[GalleryImage]]:
        """Images flagged for the general gallery"""
        query = self.supabase.table(TABLE)\
            .select("*")\
            .eq("show_in_gallery", True)
        return execute_rows(self._ordered(query), GalleryImage, "gallery images")

    def fetch_pongal_images(self) -> Result[List[GalleryImage]]:
        """Images flagged for the Pongal festival carousel"""
        query = self.supabase.table(TABLE)\
            .select("*")\
            .eq("pongal_images", True)
        return execute_rows(self._ordered(query), GalleryImage, "pongal images")

    def fetch_gallery_images_by_category(self, category: str) -> Result[List[GalleryImage]]:
        query = self.supabase.table(TABLE)\
            .select("*")\
            .eq("category", category)
        return execute_rows(self._ordered(query), GalleryImage, "gallery images by category")

    def fetch_gallery_images_by_event(self, event_id: str) -> Result[List[GalleryImage]]:
        query = self.supabase.table(TABLE)\
            .select("*")\
            .eq("event_id", event_id)
        return execute_rows(self._ordered(query), GalleryImage, "gallery images by event")

    def get_gallery_images(self) -> List[GalleryImage]:
        return self.fetch_gallery_images().unwrap_or([])

    def get_pongal_images(self) -> List[GalleryImage]:
        return self.fetch_pongal_images().unwrap_or([])

    def get_gallery_images_by_category(self, category: str) -> List[GalleryImage]:
        return self.fetch_gallery_images_by_category(category).unwrap_or([])

    def get_gallery_images_by_event(self, event_id: str) -> List[GalleryImage]:
        return self.fetch_gallery_images_by_event(event_id).unwrap_or([])
