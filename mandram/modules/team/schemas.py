from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class TeamMember(BaseModel):
    id: str
    name: str
    role: str
    position_order: Optional[int] = None
    image_url: Optional[str] = None
    bio: Optional[str] = None
    email: Optional[str] = None
    linkedin_url: Optional[str] = None
    is_office_bearer: bool = False
    is_faculty: bool = False
    year: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
