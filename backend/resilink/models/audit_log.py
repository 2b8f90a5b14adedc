from sqlalchemy import Column, Integer, String
from resilink.core.database import Base
from resilink.models.columns import UtcDateTime, utcnow

class AuditLogEntry(Base):
    """Append-only record of a notable action. Never updated or deleted."""

    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, index=True)
    timestamp = Column(UtcDateTime, nullable=False, default=utcnow, index=True)
    event_type = Column(String(100), nullable=False, index=True)
    details = Column(String(1000), nullable=False)
    actor_id = Column(String(100), nullable=True)
