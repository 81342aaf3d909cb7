from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class Achievement(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    year: int
    category: Optional[str] = None
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
