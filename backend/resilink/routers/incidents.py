from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status
from resilink.core.audit import AuditLogger
from resilink.core.exceptions import NotFoundError
from resilink.core.security import get_actor_id
from resilink.dependencies import get_audit_logger, get_incident_service
from resilink.schemas.incident import IncidentCreate, IncidentResponse, IncidentStatusUpdate
from resilink.services.incidents import IncidentService

router = APIRouter(
    prefix="/incidents",
    tags=["incidents"],
    responses={401: {"description": "Missing or invalid API key"}},
)

@router.post("", response_model=IncidentResponse, status_code=status.HTTP_201_CREATED)
async def create_incident(
    incident_in: IncidentCreate,
    actor_id: str = Depends(get_actor_id),
    service: IncidentService = Depends(get_incident_service),
):
    return await service.create(
        incident_type=incident_in.type,
        description=incident_in.description,
        occurred_at=incident_in.occurred_at,
        media_url=incident_in.media_url,
        actor_id=actor_id,
    )

@router.get("/{incident_id}", response_model=IncidentResponse)
async def get_incident(
    incident_id: int,
    actor_id: str = Depends(get_actor_id),
    service: IncidentService = Depends(get_incident_service),
    audit: AuditLogger = Depends(get_audit_logger),
):
    incident = await service.get_by_id(incident_id)
    if incident is None:
        await audit.record("Incident Lookup Failed", f"Incident ID {incident_id} not found.", actor_id)
        raise NotFoundError(f"Incident with ID {incident_id} not found.")
    return incident

@router.get("", response_model=List[IncidentResponse])
async def list_incidents(
    status_filter: Optional[str] = Query(None, alias="status"),
    type_filter: Optional[str] = Query(None, alias="type"),
    actor_id: str = Depends(get_actor_id),
    service: IncidentService = Depends(get_incident_service),
):
    return await service.list(status=status_filter, incident_type=type_filter)

@router.put("/{incident_id}/status", status_code=status.HTTP_204_NO_CONTENT)
async def update_incident_status(
    incident_id: int,
    update: IncidentStatusUpdate,
    actor_id: str = Depends(get_actor_id),
    service: IncidentService = Depends(get_incident_service),
):
    if not await service.update_status(incident_id, update.new_status, actor_id):
        raise NotFoundError(f"Incident with ID {incident_id} not found.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
