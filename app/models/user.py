from sqlalchemy import Column, Integer, String, Enum as SqlEnum, DateTime, JSON, func
from sqlalchemy.orm import relationship
from app.db.base import Base
import enum

class UserRole(enum.Enum):
    hr = "hr"
    user = "user"

class User(Base):
    __tablename__ = "users"
    user_id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, nullable=False, index=True)
    phone = Column(String(20), nullable=True)
    # Absent for accounts created through a social provider
    hashed_password = Column(String, nullable=True)
    role = Column(SqlEnum(UserRole), nullable=False, default=UserRole.user)
    company = Column(String(200), nullable=True)
    skills = Column(JSON, nullable=True)
    image = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    jobs = relationship("Job", back_populates="poster")
    applications = relationship("Application", back_populates="user")
