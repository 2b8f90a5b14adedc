from typing import List
from fastapi import APIRouter, Depends, Response, status
from resilink.core.audit import AuditLogger
from resilink.core.exceptions import NotFoundError
from resilink.core.security import get_actor_id
from resilink.dependencies import get_audit_logger, get_resource_service
from resilink.schemas.resource import ResourceCreate, ResourceModeration, ResourceResponse
from resilink.services.resources import ResourceService

router = APIRouter(
    prefix="/resources",
    tags=["resources"],
    responses={401: {"description": "Missing or invalid API key"}},
)

@router.post("", response_model=ResourceResponse, status_code=status.HTTP_201_CREATED)
async def offer_resource(
    resource_in: ResourceCreate,
    actor_id: str = Depends(get_actor_id),
    service: ResourceService = Depends(get_resource_service),
):
    return await service.offer(
        resource_type=resource_in.resource_type,
        description=resource_in.description,
        location=resource_in.location,
        contact=resource_in.contact,
        actor_id=actor_id,
    )

@router.get("/{resource_id}", response_model=ResourceResponse)
async def get_resource(
    resource_id: int,
    actor_id: str = Depends(get_actor_id),
    service: ResourceService = Depends(get_resource_service),
    audit: AuditLogger = Depends(get_audit_logger),
):
    resource = await service.get_by_id(resource_id)
    if resource is None:
        await audit.record("Resource Lookup Failed", f"Resource ID {resource_id} not found.", actor_id)
        raise NotFoundError(f"Community resource with ID {resource_id} not found.")
    return resource

@router.get("", response_model=List[ResourceResponse])
async def list_available_resources(
    actor_id: str = Depends(get_actor_id),
    service: ResourceService = Depends(get_resource_service),
):
    """Only approved, available resources are listed."""
    return await service.list_available()

@router.put("/{resource_id}/moderation", status_code=status.HTTP_204_NO_CONTENT)
async def moderate_resource(
    resource_id: int,
    moderation: ResourceModeration,
    actor_id: str = Depends(get_actor_id),
    service: ResourceService = Depends(get_resource_service),
):
    if not await service.moderate(resource_id, moderation.new_status, actor_id):
        raise NotFoundError(f"Community resource with ID {resource_id} not found.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
