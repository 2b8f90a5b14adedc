from typing import List
from fastapi import APIRouter, Depends, Query
from resilink.core.audit import AuditLogger
from resilink.core.security import get_actor_id
from resilink.dependencies import get_audit_logger
from resilink.schemas.audit_log import AuditLogEntryResponse

router = APIRouter(prefix="/logs", tags=["logs"])

@router.get("", response_model=List[AuditLogEntryResponse])
async def list_logs(
    page: int = 1,
    page_size: int = Query(20, alias="pageSize"),
    actor_id: str = Depends(get_actor_id),
    audit: AuditLogger = Depends(get_audit_logger),
):
    # Reading the trail is not itself audited
    return await audit.list_entries(page, page_size)
