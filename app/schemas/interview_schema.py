from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime


class InterviewCreate(BaseModel):
    applicant_id: Optional[int] = None
    job_id: Optional[int] = None
    interview_date: Optional[str] = None
    interview_time: Optional[str] = None
    interview_type: Optional[str] = None
    notes: Optional[str] = None


class InterviewResponse(BaseModel):
    interview_id: int
    application_id: int
    job_id: int
    interview_date: date
    interview_time: str
    scheduled_at: datetime
    ends_at: datetime
    interview_type: str
    status: str
    meet_link: Optional[str] = None
    notes: Optional[str] = None
    scheduled_by: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class InterviewApplicantSummary(BaseModel):
    application_id: int
    full_name: str
    contact_email: str

    class Config:
        from_attributes = True


class InterviewJobSummary(BaseModel):
    job_id: int
    job_title: str
    job_mode: str

    class Config:
        from_attributes = True


class InterviewListItem(InterviewResponse):
    application: Optional[InterviewApplicantSummary] = None
    job: Optional[InterviewJobSummary] = None


class ScheduleInterviewResponse(BaseModel):
    message: str
    interview: InterviewResponse
    # Empty when the calendar event could not be created
    meet_link: str = ""
    calendar_event_created: bool = False
    email_sent: bool = False
