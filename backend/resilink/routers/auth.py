from fastapi import APIRouter, Depends
from resilink.core.audit import ACCESS_EVENT, AuditLogger
from resilink.core.security import get_actor_id
from resilink.dependencies import get_audit_logger
from resilink.schemas.audit_log import ApiKeyVerification

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/verify-apikey", response_model=ApiKeyVerification)
async def verify_api_key(
    actor_id: str = Depends(get_actor_id),
    audit: AuditLogger = Depends(get_audit_logger),
):
    """Confirm the X-API-KEY header is valid and record the access."""
    await audit.record(ACCESS_EVENT, "API key validated. Access granted.", actor_id)
    return ApiKeyVerification(
        message="API key is valid. Authentication succeeded.",
        authenticated_user=actor_id,
    )
