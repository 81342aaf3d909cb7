from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class GalleryImage(BaseModel):
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    image_url: str
    event_id: Optional[str] = None
    category: Optional[str] = None
    display_order: Optional[int] = None
    show_in_gallery: Optional[bool] = None
    pongal_images: Optional[bool] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
