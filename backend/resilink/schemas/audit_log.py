from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class AuditLogEntryResponse(BaseModel):
    id: int
    timestamp: datetime
    event_type: str
    details: str
    actor_id: Optional[str] = None

    class Config:
        from_attributes = True

class ApiKeyVerification(BaseModel):
    message: str
    authenticated_user: str
