from sqlalchemy.ext.asyncio import AsyncSession
from app.core.timeutils import utcnow
from app.models.application import ApplicationStatus
from app.models.job import JobStatus
from app.repositories.application_repo import ApplicationRepository
from app.repositories.interview_repo import InterviewRepository
from app.repositories.job_repo import JobRepository


async def get_dashboard_summary(db: AsyncSession, hr_user_id: int):
    job_repo = JobRepository(db)
    jobs = await job_repo.get_jobs_by_owner(hr_user_id)

    jobs_by_status = {s.value: 0 for s in JobStatus}
    for job in jobs:
        jobs_by_status[job.status] = jobs_by_status.get(job.status, 0) + 1

    status_counts = await ApplicationRepository.count_by_status_for_job_owner(db, hr_user_id)
    applicant_funnel = [
        {"stage": s.value, "count": status_counts.get(s.value, 0)}
        for s in ApplicationStatus
    ]
    total_applicants = sum(status_counts.values())

    # Jobs are already newest first
    recent_jobs = jobs[:5]
    applicant_counts = await job_repo.count_applicants_by_job([j.job_id for j in recent_jobs])
    recent_jobs_data = [
        {
            "job_id": j.job_id,
            "job_title": j.job_title,
            "status": j.status,
            "applicant_count": applicant_counts.get(j.job_id, 0),
            "deadline": j.deadline,
        }
        for j in recent_jobs
    ]

    upcoming_interviews = await InterviewRepository.count_upcoming_for_hr(db, hr_user_id, utcnow())

    return {
        "total_jobs": len(jobs),
        "active_jobs": jobs_by_status.get(JobStatus.ACTIVE.value, 0),
        "jobs_by_status": jobs_by_status,
        "total_applicants": total_applicants,
        "applicant_funnel": applicant_funnel,
        "upcoming_interviews": upcoming_interviews,
        "recent_jobs": recent_jobs_data,
    }
