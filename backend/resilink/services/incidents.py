"""
Incident lifecycle.

Status is free text: any non-empty string is accepted as the new status,
including moving a resolved incident back to an earlier state. There is no
transition table.
"""

import logging
from datetime import datetime
from typing import List, Optional

from resilink.core.audit import AuditLogger
from resilink.core.exceptions import InvalidArgumentError, PersistenceError
from resilink.core.store import RecordStore
from resilink.models.columns import utcnow
from resilink.models.incident import DEFAULT_STATUS, Incident

logger = logging.getLogger(__name__)


class IncidentService:
    def __init__(self, store: RecordStore, audit: AuditLogger):
        self.store = store
        self.audit = audit

    async def create(
        self,
        incident_type: str,
        description: str,
        occurred_at: datetime,
        media_url: Optional[str] = None,
        actor_id: Optional[str] = None,
    ) -> Incident:
        incident = Incident(
            type=incident_type,
            description=description,
            occurred_at=occurred_at,
            status=DEFAULT_STATUS,
            registered_at=utcnow(),
            media_url=media_url,
        )
        try:
            await self.store.incidents.add(incident)
        except PersistenceError as e:
            await self.audit.record("Database Error", f"Failed to register incident: {e}", actor_id)
            raise

        logger.info("Registered incident id=%s type=%r", incident.id, incident.type)
        await self.audit.record("Incident Created", f"ID: {incident.id}, Type: {incident.type}", actor_id)
        return incident

    async def get_by_id(self, incident_id: int) -> Optional[Incident]:
        try:
            return await self.store.incidents.get(incident_id)
        except PersistenceError as e:
            await self.audit.record("Database Error", f"Failed to fetch incident ID {incident_id}: {e}", "System")
            raise

    async def list(self, status: Optional[str] = None, incident_type: Optional[str] = None) -> List[Incident]:
        """Newest registration first.

        ``status`` must match exactly (ignoring case); ``incident_type`` matches
        any type containing it (ignoring case). Both filters combine with AND.
        """
        try:
            return await self.store.incidents.list(status=status, type_contains=incident_type)
        except PersistenceError as e:
            await self.audit.record("Database Error", f"Failed to list incidents: {e}", "System")
            raise

    async def update_status(self, incident_id: int, new_status: str, actor_id: str) -> bool:
        if not new_status or not new_status.strip():
            raise InvalidArgumentError("New status must not be empty.")

        try:
            outcome = await self.store.incidents.update(incident_id, status=new_status)
        except PersistenceError as e:
            await self.audit.record(
                "Database Error", f"Failed to update status of incident ID {incident_id}: {e}", actor_id
            )
            raise

        if outcome is None:
            await self.audit.record("Update Failed", f"Incident ID {incident_id} not found.", actor_id)
            return False

        previous, _ = outcome
        await self.audit.record(
            "Incident Status Updated",
            f"ID: {incident_id}, From: {previous['status']}, To: {new_status}",
            actor_id,
        )
        return True
