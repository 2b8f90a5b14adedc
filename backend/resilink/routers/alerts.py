from typing import List
from fastapi import APIRouter, Depends, status
from resilink.core.audit import AuditLogger
from resilink.core.exceptions import NotFoundError
from resilink.core.security import get_actor_id
from resilink.dependencies import get_alert_service, get_audit_logger
from resilink.schemas.alert import AlertCreate, AlertResponse
from resilink.services.alerts import AlertService

router = APIRouter(
    prefix="/alerts",
    tags=["alerts"],
    responses={401: {"description": "Missing or invalid API key"}},
)

@router.post("", response_model=AlertResponse, status_code=status.HTTP_201_CREATED)
async def create_alert(
    alert_in: AlertCreate,
    actor_id: str = Depends(get_actor_id),
    service: AlertService = Depends(get_alert_service),
):
    return await service.issue(alert_in.message, alert_in.severity, alert_in.area, issuer_id=actor_id)

@router.get("/{alert_id}", response_model=AlertResponse)
async def get_alert(
    alert_id: int,
    actor_id: str = Depends(get_actor_id),
    service: AlertService = Depends(get_alert_service),
    audit: AuditLogger = Depends(get_audit_logger),
):
    alert = await service.get_by_id(alert_id)
    if alert is None:
        await audit.record("Alert Lookup Failed", f"Alert ID {alert_id} not found.", actor_id)
        raise NotFoundError(f"Alert with ID {alert_id} not found.")
    return alert

@router.get("", response_model=List[AlertResponse])
async def list_alerts(
    actor_id: str = Depends(get_actor_id),
    service: AlertService = Depends(get_alert_service),
):
    return await service.list()
