from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.db.base import Base
from datetime import datetime, timezone
from enum import Enum


class InterviewStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Interview(Base):
    __tablename__ = "interviews"

    interview_id = Column(Integer, primary_key=True, index=True)
    application_id = Column(Integer, ForeignKey(
        "applications.application_id"), nullable=False, index=True)
    job_id = Column(Integer, ForeignKey("jobs.job_id"), nullable=False, index=True)

    # Date and time as requested by HR, plus the resolved slot in UTC
    interview_date = Column(Date, nullable=False)
    interview_time = Column(String(20), nullable=False)
    scheduled_at = Column(DateTime(timezone=True), nullable=False)
    ends_at = Column(DateTime(timezone=True), nullable=False)

    interview_type = Column(String(100), nullable=False)
    status = Column(String(20), default=InterviewStatus.SCHEDULED.value, nullable=False)
    meet_link = Column(String, nullable=True)
    notes = Column(Text, nullable=True)

    scheduled_by = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    created_at = Column(DateTime(timezone=True),
                        default=lambda: datetime.now(timezone.utc))

    application = relationship("Application", back_populates="interviews")
    job = relationship("Job", back_populates="interviews")
    scheduler = relationship("User", foreign_keys=[scheduled_by])
