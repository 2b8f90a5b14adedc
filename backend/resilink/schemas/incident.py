from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class IncidentCreate(BaseModel):
    type: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=1000)
    occurred_at: datetime
    media_url: Optional[str] = Field(None, max_length=2048)

class IncidentStatusUpdate(BaseModel):
    # Emptiness is checked by the service so it surfaces as a 400, like any other bad status
    new_status: str = Field(..., max_length=50)

class IncidentResponse(BaseModel):
    id: int
    type: str
    description: str
    occurred_at: datetime
    status: str
    registered_at: datetime
    media_url: Optional[str] = None

    class Config:
        from_attributes = True
