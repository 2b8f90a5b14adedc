from pydantic import BaseModel, Field
from datetime import datetime

class AlertCreate(BaseModel):
    message: str = Field(..., min_length=10, max_length=500)
    severity: str = Field(..., min_length=1, max_length=50)  # e.g. Informativo, Atenção, Perigo
    area: str = Field(..., min_length=1, max_length=200)

class AlertResponse(BaseModel):
    id: int
    message: str
    severity: str
    area: str
    issued_at: datetime
    issuer_id: str

    class Config:
        from_attributes = True
