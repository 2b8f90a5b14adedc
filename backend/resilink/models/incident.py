from sqlalchemy import Column, Integer, String, Text
from resilink.core.database import Base
from resilink.models.columns import UtcDateTime, utcnow

DEFAULT_STATUS = "Open"

class Incident(Base):
    __tablename__ = "incidents"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(String(100), nullable=False, index=True)  # e.g. "Falta de Energia", "Alagamento"
    description = Column(Text, nullable=False)
    occurred_at = Column(UtcDateTime, nullable=False)
    status = Column(String(50), nullable=False, default=DEFAULT_STATUS)  # free text, "Open" on creation
    registered_at = Column(UtcDateTime, nullable=False, default=utcnow)
    media_url = Column(String(2048), nullable=True)

    def __repr__(self) -> str:
        return f"<Incident id={self.id} type={self.type!r} status={self.status!r}>"
