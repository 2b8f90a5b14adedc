from fastapi import APIRouter, Depends
from resilink.core.security import get_actor_id
from resilink.dependencies import get_report_service
from resilink.schemas.report import StatusReportResponse
from resilink.services.reports import ReportService

router = APIRouter(prefix="/reports", tags=["reports"])

@router.get("/status", response_model=StatusReportResponse)
async def get_status_report(
    actor_id: str = Depends(get_actor_id),
    service: ReportService = Depends(get_report_service),
):
    return await service.generate_status_report()
