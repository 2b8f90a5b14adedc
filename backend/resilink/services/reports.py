"""
Status report aggregation.

The report is computed from the store on every call; nothing is cached.
"""

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Dict

from resilink.core.audit import ACCESS_EVENT, AuditLogger
from resilink.core.exceptions import ReportGenerationError
from resilink.core.store import RecordStore
from resilink.models.columns import utcnow
from resilink.models.incident import DEFAULT_STATUS

logger = logging.getLogger(__name__)

ACTIVE_USER_WINDOW = timedelta(hours=24)


@dataclass
class StatusReport:
    open_incident_count: int = 0
    total_alert_count: int = 0
    active_users_last_24h: int = 0
    incident_count_by_type: Dict[str, int] = field(default_factory=dict)


class ReportService:
    def __init__(self, store: RecordStore, audit: AuditLogger):
        self.store = store
        self.audit = audit

    async def generate_status_report(self) -> StatusReport:
        try:
            # Raw status match: any incident whose status reads "Open" counts
            open_incidents = await self.store.incidents.count_with_status(DEFAULT_STATUS)
            # Every alert ever issued, no time window
            total_alerts = await self.store.alerts.count()
            active_users = await self._count_active_users()
            by_type = await self.store.incidents.count_by_type()
        except Exception as e:
            logger.exception("Status report generation failed")
            await self.audit.record("Report Error", f"Failed to generate status report: {e}", "System")
            raise ReportGenerationError("An error occurred while generating the status report.") from e

        await self.audit.record("Report Generated", "General status report was generated.", "System")
        return StatusReport(
            open_incident_count=open_incidents,
            total_alert_count=total_alerts,
            active_users_last_24h=active_users,
            incident_count_by_type=by_type,
        )

    async def _count_active_users(self) -> int:
        since = utcnow() - ACTIVE_USER_WINDOW
        active = await self.store.audit_logs.count_distinct_actors(ACCESS_EVENT, since)
        # Any access at all, even older than the window, shows as one user
        if active == 0 and await self.store.audit_logs.exists(ACCESS_EVENT):
            active = 1
        return active
