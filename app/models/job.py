from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Float
from sqlalchemy.orm import relationship
from app.db.base import Base
from datetime import datetime, timezone
from enum import Enum


class JobStatus(str, Enum):
    ACTIVE = "active"
    CLOSED = "closed"
    DRAFT = "draft"


class Job(Base):
    __tablename__ = "jobs"

    job_id = Column(Integer, primary_key=True, index=True)
    job_title = Column(String(200), nullable=False)
    num_openings = Column(Integer, nullable=False)
    # min <= max is not enforced
    min_salary = Column(Float, nullable=False)
    max_salary = Column(Float, nullable=False)
    job_mode = Column(String(50), nullable=False)
    job_description = Column(Text, nullable=False)
    deadline = Column(DateTime(timezone=True), nullable=True)
    status = Column(String(20), default=JobStatus.ACTIVE.value, nullable=False)

    posted_by = Column(Integer, ForeignKey("users.user_id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True),
                        default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime(timezone=True),
                        default=lambda: datetime.now(timezone.utc),
                        onupdate=lambda: datetime.now(timezone.utc))

    poster = relationship("User", back_populates="jobs")
    applications = relationship(
        "Application",
        back_populates="job",
        cascade="all, delete-orphan"
    )
    interviews = relationship(
        "Interview",
        back_populates="job",
        cascade="all, delete-orphan"
    )
