"""
Best-effort audit trail.

record() appends an AuditLogEntry after the business write has already
committed. A failing audit write is logged and swallowed: losing an audit
entry must never fail the operation that triggered it.
"""

import logging
from typing import List, Optional, Tuple

from resilink.core.store import RecordStore
from resilink.models.audit_log import AuditLogEntry
from resilink.models.columns import utcnow

logger = logging.getLogger(__name__)

MAX_DETAILS_LENGTH = 1000
MAX_PAGE_SIZE = 100

# Event type recorded when an API key is verified; counted as an active user in reports
ACCESS_EVENT = "API Key Access"


def clamp_page(page: int, page_size: int) -> Tuple[int, int]:
    page = max(page, 1)
    page_size = min(max(page_size, 1), MAX_PAGE_SIZE)
    return page, page_size


class AuditLogger:
    def __init__(self, store: RecordStore):
        self.store = store

    async def record(self, event_type: str, details: str, actor_id: Optional[str] = None) -> None:
        if not event_type or not event_type.strip():
            return
        if not details or not details.strip():
            return

        entry = AuditLogEntry(
            timestamp=utcnow(),
            event_type=event_type,
            details=details[:MAX_DETAILS_LENGTH],
            actor_id=actor_id,
        )
        try:
            await self.store.audit_logs.add(entry)
        except Exception as e:
            logger.error(
                "Could not persist audit entry type=%r actor=%r: %s",
                event_type, actor_id or "System", e,
            )

    async def list_entries(self, page: int = 1, page_size: int = 20) -> List[AuditLogEntry]:
        """Newest entries first. Out-of-range paging values are clamped, not rejected."""
        page, page_size = clamp_page(page, page_size)
        return await self.store.audit_logs.page((page - 1) * page_size, page_size)
