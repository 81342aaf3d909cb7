from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class Event(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    date: datetime
    location: Optional[str] = None
    image_url: Optional[str] = None
    category: Optional[str] = None
    is_featured: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
