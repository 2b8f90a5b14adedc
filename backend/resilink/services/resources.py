"""
Community resource moderation.

New resources start as "Pendente" and stay out of the public listing until
approved. Moderation is a closed two-value transition; availability follows
the moderation outcome.
"""

import logging
from typing import List, Optional

from resilink.core.audit import AuditLogger
from resilink.core.exceptions import InvalidArgumentError, PersistenceError
from resilink.core.store import RecordStore
from resilink.models.columns import utcnow
from resilink.models.resource import (
    MODERATION_APPROVED,
    MODERATION_PENDING,
    MODERATION_REJECTED,
    CommunityResource,
)

logger = logging.getLogger(__name__)

# Moderation outcome -> resulting availability
MODERATION_OUTCOMES = {
    MODERATION_APPROVED: True,
    MODERATION_REJECTED: False,
}


class ResourceService:
    def __init__(self, store: RecordStore, audit: AuditLogger):
        self.store = store
        self.audit = audit

    async def offer(
        self,
        resource_type: str,
        description: str,
        location: str,
        contact: str,
        actor_id: Optional[str] = None,
    ) -> CommunityResource:
        resource = CommunityResource(
            resource_type=resource_type,
            description=description,
            location=location,
            contact=contact,
            available=True,
            moderation_status=MODERATION_PENDING,
            created_at=utcnow(),
            provider_id=actor_id,
        )
        try:
            await self.store.resources.add(resource)
        except PersistenceError as e:
            await self.audit.record("Database Error", f"Failed to offer resource: {e}", actor_id)
            raise

        await self.audit.record(
            "Resource Offered", f"ID: {resource.id}, Type: {resource.resource_type}", actor_id
        )
        return resource

    async def get_by_id(self, resource_id: int) -> Optional[CommunityResource]:
        try:
            return await self.store.resources.get(resource_id)
        except PersistenceError as e:
            await self.audit.record(
                "Database Error", f"Failed to fetch community resource ID {resource_id}: {e}", "System"
            )
            raise

    async def list_available(self) -> List[CommunityResource]:
        """Approved and available resources, newest first."""
        try:
            return await self.store.resources.list_available()
        except PersistenceError as e:
            await self.audit.record("Database Error", f"Failed to list available resources: {e}", "System")
            raise

    async def moderate(self, resource_id: int, new_status: str, actor_id: str) -> bool:
        if new_status not in MODERATION_OUTCOMES:
            raise InvalidArgumentError(
                f"Invalid moderation status. Use '{MODERATION_APPROVED}' or '{MODERATION_REJECTED}'."
            )

        try:
            outcome = await self.store.resources.update(
                resource_id,
                moderation_status=new_status,
                available=MODERATION_OUTCOMES[new_status],
            )
        except PersistenceError as e:
            await self.audit.record(
                "Database Error", f"Failed to moderate resource ID {resource_id}: {e}", actor_id
            )
            raise

        if outcome is None:
            await self.audit.record("Moderation Failed", f"Resource ID {resource_id} not found.", actor_id)
            return False

        previous, _ = outcome
        logger.info("Resource id=%s moderated %s -> %s", resource_id, previous["moderation_status"], new_status)
        await self.audit.record(
            "Resource Moderated",
            f"ID: {resource_id}, From: {previous['moderation_status']}, To: {new_status}",
            actor_id,
        )
        return True
