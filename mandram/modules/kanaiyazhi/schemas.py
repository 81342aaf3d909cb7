from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class KanaiyazhiEdition(BaseModel):
    id: str
    edition_number: int
    title: str
    subtitle: Optional[str] = None
    description: Optional[str] = None
    year: int
    month: Optional[str] = None
    cover_image_url: str
    pdf_url: str
    page_count: Optional[int] = None
    is_featured: bool = False
    display_order: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
