from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey
from datetime import datetime, timezone
from app.db.base import Base


class AuditLog(Base):
    """Business events recorded by workflow services, one row per action."""
    __tablename__ = 'audit_logs'
    id = Column(Integer, primary_key=True, autoincrement=True)
    timestamp = Column(DateTime(timezone=True), default=lambda: datetime.now(
        timezone.utc), nullable=False, index=True)
    action = Column(String(100), nullable=False)
    status = Column(String(20), nullable=False)
    details = Column(Text, nullable=True)
    actor_id = Column(Integer, ForeignKey("users.user_id", ondelete="SET NULL"),
                      nullable=True, index=True)
    entity_type = Column(String(50), nullable=True)
    entity_id = Column(String(64), nullable=True)
