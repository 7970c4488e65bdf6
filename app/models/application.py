from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from app.db.base import Base
from datetime import datetime, timezone
from enum import Enum


class ApplicationStatus(str, Enum):
    APPLIED = "applied"
    REVIEWED = "reviewed"
    INTERVIEWED = "interviewed"
    OFFER = "offer"
    HIRED = "hired"
    REJECTED = "rejected"

    @classmethod
    def values(cls):
        return [member.value for member in cls]


class Application(Base):
    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("user_id", "job_id", name="uq_applications_user_job"),
    )

    application_id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False, index=True)
    job_id = Column(Integer, ForeignKey("jobs.job_id"), nullable=False, index=True)
    full_name = Column(String(200), nullable=False)
    contact_email = Column(String(200), nullable=False)
    phone_number = Column(String(20), nullable=True)
    cover_letter = Column(Text, nullable=True)
    resume_url = Column(String, nullable=False)
    status = Column(String(20), default=ApplicationStatus.APPLIED.value, nullable=False)
    applied_at = Column(DateTime(timezone=True),
                        default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime(timezone=True),
                        default=lambda: datetime.now(timezone.utc),
                        onupdate=lambda: datetime.now(timezone.utc))

    user = relationship("User", back_populates="applications")
    job = relationship("Job", back_populates="applications")
    interviews = relationship(
        "Interview",
        back_populates="application",
        cascade="all, delete-orphan"
    )
