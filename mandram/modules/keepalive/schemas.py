from pydantic import BaseModel
from typing import Any, List, Optional


class KeepaliveResult(BaseModel):
    success: bool
    status: Optional[str] = None
    message: Optional[str] = None
    timestamp: Optional[str] = None
    data: Optional[List[Any]] = None
    error: Optional[str] = None
