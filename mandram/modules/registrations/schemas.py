from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class RegistrationInput(BaseModel):
    # Defaults keep missing fields out of FastAPI's 422 path; validation happens in the service
    name: str = ""
    email: str = ""
    phone: Optional[str] = None
    reason: str = ""
    message: Optional[str] = None


class Registration(BaseModel):
    id: str
    name: str
    email: str
    phone: Optional[str] = None
    reason: str
    message: Optional[str] = None
    registration_date: Optional[datetime] = None

    class Config:
        from_attributes = True


class RegistrationResult(BaseModel):
    success: bool
    error: Optional[str] = None
