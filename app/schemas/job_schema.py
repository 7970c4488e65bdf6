from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class JobFields(BaseModel):
    """Raw job form fields; validated by the job service."""
    job_title: Optional[str] = None
    num_openings: Optional[int] = None
    min_salary: Optional[float] = None
    max_salary: Optional[float] = None
    job_mode: Optional[str] = None
    job_description: Optional[str] = None
    deadline: Optional[str] = None


class JobCreate(JobFields):
    pass


class JobUpdate(JobFields):
    status: Optional[str] = None


class PosterSummary(BaseModel):
    user_id: int
    name: str
    email: str
    company: Optional[str] = None

    class Config:
        from_attributes = True


class JobSummary(BaseModel):
    job_id: int
    job_title: str
    job_mode: str
    min_salary: float
    max_salary: float
    deadline: Optional[datetime] = None

    class Config:
        from_attributes = True


class JobResponse(JobSummary):
    num_openings: int
    job_description: str
    status: str
    posted_by: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class JobDetailResponse(JobResponse):
    poster: Optional[PosterSummary] = None


class CandidateJobResponse(JobSummary):
    num_openings: int
    job_description: str
    created_at: Optional[datetime] = None
    has_applied: bool = False
    user_application_status: Optional[str] = None


class JobMutationResponse(BaseModel):
    message: str
    job: JobResponse
