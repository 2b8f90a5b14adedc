from pydantic import BaseModel
from typing import Dict

class StatusReportResponse(BaseModel):
    open_incident_count: int
    total_alert_count: int
    active_users_last_24h: int
    incident_count_by_type: Dict[str, int] = {}

    class Config:
        from_attributes = True
