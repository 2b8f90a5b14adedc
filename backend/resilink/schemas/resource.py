from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class ResourceCreate(BaseModel):
    resource_type: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=500)
    location: str = Field(..., min_length=1, max_length=200)
    contact: str = Field(..., min_length=1, max_length=100)

class ResourceModeration(BaseModel):
    # Only "Aprovado" and "Rejeitado" are accepted; checked by the service
    new_status: str = Field(..., max_length=50)

class ResourceResponse(BaseModel):
    id: int
    resource_type: str
    description: str
    location: str
    contact: str
    available: bool
    moderation_status: str
    created_at: datetime
    provider_id: Optional[str] = None

    class Config:
        from_attributes = True
