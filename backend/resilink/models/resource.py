from sqlalchemy import Boolean, Column, Integer, String
from resilink.core.database import Base
from resilink.models.columns import UtcDateTime, utcnow

MODERATION_PENDING = "Pendente"
MODERATION_APPROVED = "Aprovado"
MODERATION_REJECTED = "Rejeitado"

class CommunityResource(Base):
    __tablename__ = "community_resources"

    id = Column(Integer, primary_key=True, index=True)
    resource_type = Column(String(100), nullable=False)
    description = Column(String(500), nullable=False)
    location = Column(String(200), nullable=False)
    contact = Column(String(100), nullable=False)
    available = Column(Boolean, nullable=False, default=True)
    moderation_status = Column(String(50), nullable=False, default=MODERATION_PENDING, index=True)
    created_at = Column(UtcDateTime, nullable=False, default=utcnow)
    provider_id = Column(String(100), nullable=True)
