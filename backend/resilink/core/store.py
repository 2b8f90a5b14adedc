"""
Record store for the four persisted record kinds.

Every operation opens its own short-lived AsyncSession from the session
factory, so each call is an independent unit of work. SQLAlchemy errors are
wrapped in PersistenceError. Updates are plain read-modify-write; concurrent
writers on the same row race and the last commit wins.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, AsyncIterator, Dict, List, Optional, Tuple

from sqlalchemy import desc, distinct, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from resilink.core.exceptions import PersistenceError
from resilink.models.alert import Alert
from resilink.models.audit_log import AuditLogEntry
from resilink.models.incident import Incident
from resilink.models.resource import MODERATION_APPROVED, CommunityResource

logger = logging.getLogger(__name__)


class AppendOnlyStore:
    """Insert and read access for one model class."""

    model: Any = None

    def __init__(self, session_factory) -> None:
        self._session_factory = session_factory

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        async with self._session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error("%s.%s failed: %s", self.model.__tablename__, operation, e)
                raise PersistenceError(str(e), f"{self.model.__tablename__}.{operation}") from e

    async def add(self, record):
        async with self._session("add") as session:
            session.add(record)
            await session.commit()
        return record

    async def get(self, record_id: int):
        async with self._session("get") as session:
            return await session.get(self.model, record_id)

    async def count(self) -> int:
        async with self._session("count") as session:
            result = await session.execute(select(func.count()).select_from(self.model))
            return result.scalar_one()


class BaseStore(AppendOnlyStore):
    """Adds in-place updates on top of insert and read."""

    async def update(self, record_id: int, **values) -> Optional[Tuple[Dict[str, Any], Any]]:
        """Overwrite columns on one record.

        Returns (previous values, record), or None when the record is absent.
        """
        async with self._session("update") as session:
            record = await session.get(self.model, record_id)
            if record is None:
                return None
            previous = {name: getattr(record, name) for name in values}
            for name, value in values.items():
                setattr(record, name, value)
            await session.commit()
            return previous, record


class IncidentStore(BaseStore):
    model = Incident

    async def list(self, status: Optional[str] = None, type_contains: Optional[str] = None) -> List[Incident]:
        query = select(Incident)
        if status:
            query = query.where(func.lower(Incident.status) == status.lower())
        if type_contains:
            query = query.where(
                func.lower(Incident.type).contains(type_contains.lower(), autoescape=True)
            )
        query = query.order_by(desc(Incident.registered_at), desc(Incident.id))
        async with self._session("list") as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def count_with_status(self, status: str) -> int:
        async with self._session("count_with_status") as session:
            result = await session.execute(
                select(func.count())
                .select_from(Incident)
                .where(func.lower(Incident.status) == status.lower())
            )
            return result.scalar_one()

    async def count_by_type(self) -> Dict[str, int]:
        async with self._session("count_by_type") as session:
            result = await session.execute(
                select(Incident.type, func.count(Incident.id)).group_by(Incident.type)
            )
            return {incident_type: count for incident_type, count in result.all()}


class AlertStore(BaseStore):
    model = Alert

    async def list(self) -> List[Alert]:
        async with self._session("list") as session:
            result = await session.execute(
                select(Alert).order_by(desc(Alert.issued_at), desc(Alert.id))
            )
            return list(result.scalars().all())


class ResourceStore(BaseStore):
    model = CommunityResource

    async def list_available(self) -> List[CommunityResource]:
        async with self._session("list_available") as session:
            result = await session.execute(
                select(CommunityResource)
                .where(
                    CommunityResource.moderation_status == MODERATION_APPROVED,
                    CommunityResource.available.is_(True),
                )
                .order_by(desc(CommunityResource.created_at), desc(CommunityResource.id))
            )
            return list(result.scalars().all())


class AuditLogStore(AppendOnlyStore):
    """Append-only: entries are never updated or deleted."""

    model = AuditLogEntry

    async def page(self, offset: int, limit: int) -> List[AuditLogEntry]:
        async with self._session("page") as session:
            result = await session.execute(
                select(AuditLogEntry)
                .order_by(desc(AuditLogEntry.timestamp), desc(AuditLogEntry.id))
                .offset(offset)
                .limit(limit)
            )
            return list(result.scalars().all())

    async def count_distinct_actors(self, event_type: str, since: datetime) -> int:
        async with self._session("count_distinct_actors") as session:
            result = await session.execute(
                select(func.count(distinct(AuditLogEntry.actor_id))).where(
                    AuditLogEntry.event_type == event_type,
                    AuditLogEntry.timestamp >= since,
                )
            )
            return result.scalar_one()

    async def exists(self, event_type: str) -> bool:
        async with self._session("exists") as session:
            result = await session.execute(
                select(AuditLogEntry.id).where(AuditLogEntry.event_type == event_type).limit(1)
            )
            return result.first() is not None


class RecordStore:
    """Bundle of the sub-stores, built from one session factory and passed to every service."""

    def __init__(self, session_factory) -> None:
        self.incidents = IncidentStore(session_factory)
        self.alerts = AlertStore(session_factory)
        self.resources = ResourceStore(session_factory)
        self.audit_logs = AuditLogStore(session_factory)
