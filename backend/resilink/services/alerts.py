"""Alert issuing. Alerts are write-once: there is no update or delete."""

import logging
from typing import List, Optional

from resilink.core.audit import AuditLogger
from resilink.core.exceptions import PersistenceError
from resilink.core.store import RecordStore
from resilink.models.alert import Alert
from resilink.models.columns import utcnow

logger = logging.getLogger(__name__)


class AlertService:
    def __init__(self, store: RecordStore, audit: AuditLogger):
        self.store = store
        self.audit = audit

    async def issue(self, message: str, severity: str, area: str, issuer_id: str) -> Alert:
        alert = Alert(
            message=message,
            severity=severity,
            area=area,
            issued_at=utcnow(),
            issuer_id=issuer_id,
        )
        try:
            await self.store.alerts.add(alert)
        except PersistenceError as e:
            await self.audit.record("Database Error", f"Failed to create alert: {e}", issuer_id)
            raise

        await self.audit.record("Alert Created", f"ID: {alert.id}, Severity: {alert.severity}", issuer_id)
        # Broadcast to subscribers is simulated
        logger.info("SIMULATED ALERT: %r for %r", alert.message, alert.area)
        return alert

    async def get_by_id(self, alert_id: int) -> Optional[Alert]:
        try:
            return await self.store.alerts.get(alert_id)
        except PersistenceError as e:
            await self.audit.record("Database Error", f"Failed to fetch alert ID {alert_id}: {e}", "System")
            raise

    async def list(self) -> List[Alert]:
        try:
            return await self.store.alerts.list()
        except PersistenceError as e:
            await self.audit.record("Database Error", f"Failed to list alerts: {e}", "System")
            raise
