from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from app.schemas.job_schema import JobSummary, PosterSummary


class ApplicationCreate(BaseModel):
    job_id: Optional[int] = None
    full_name: Optional[str] = None
    contact_email: Optional[str] = None
    phone_number: Optional[str] = None
    cover_letter: Optional[str] = None
    resume_url: Optional[str] = None


class ApplicationStatusUpdate(BaseModel):
    status: Optional[str] = None


class ApplicationResponse(BaseModel):
    application_id: int
    user_id: int
    job_id: int
    full_name: str
    contact_email: str
    phone_number: Optional[str] = None
    cover_letter: Optional[str] = None
    resume_url: str
    status: str
    applied_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CandidateSummary(BaseModel):
    user_id: int
    name: str
    email: str
    phone: Optional[str] = None

    class Config:
        from_attributes = True


class JobWithPoster(JobSummary):
    poster: Optional[PosterSummary] = None


class CandidateApplicationResponse(ApplicationResponse):
    """An application as its candidate sees it."""
    job: Optional[JobSummary] = None


class ApplicantResponse(ApplicationResponse):
    """An application as the HR user sees it in the applicant list."""
    user: Optional[CandidateSummary] = None
    job: Optional[JobSummary] = None


class ApplicantDetailResponse(ApplicationResponse):
    user: Optional[CandidateSummary] = None
    job: Optional[JobWithPoster] = None


class ApplicationSubmitResponse(BaseModel):
    message: str
    application: ApplicationResponse


class ApplicationStatusResponse(BaseModel):
    message: str
    applicant: ApplicationResponse
