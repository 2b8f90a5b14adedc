from sqlalchemy import Column, Integer, String
from resilink.core.database import Base
from resilink.models.columns import UtcDateTime, utcnow

class Alert(Base):
    __tablename__ = "alerts"

    id = Column(Integer, primary_key=True, index=True)
    message = Column(String(500), nullable=False)
    severity = Column(String(50), nullable=False)  # e.g. "Informativo", "Atenção", "Perigo"
    area = Column(String(200), nullable=False)
    issued_at = Column(UtcDateTime, nullable=False, default=utcnow, index=True)
    issuer_id = Column(String(100), nullable=False)
