# Models module
from .user import User, UserRole
from .job import Job, JobStatus
from .application import Application, ApplicationStatus
from .interview import Interview, InterviewStatus
from .revoked_token import RevokedToken
from .audit_log import AuditLog

__all__ = [
    "User",
    "UserRole",
    "Job",
    "JobStatus",
    "Application",
    "ApplicationStatus",
    "Interview",
    "InterviewStatus",
    "RevokedToken",
    "AuditLog"
]
