from datetime import datetime
from typing import List
from sqlalchemy import select, func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from app.models.interview import Interview, InterviewStatus
from app.models.job import Job


class InterviewRepository:
    @staticmethod
    async def create_interview(db: AsyncSession, data: dict) -> Interview:
        interview = Interview(**data)
        db.add(interview)
        await db.commit()
        await db.refresh(interview)
        return interview

    @staticmethod
    def _visible_to(hr_user_id: int):
        # Scheduled by this HR user, or for a job they posted
        return or_(
            Interview.scheduled_by == hr_user_id,
            Interview.job_id.in_(select(Job.job_id).where(Job.posted_by == hr_user_id))
        )

    @staticmethod
    async def get_interviews_for_hr(db: AsyncSession, hr_user_id: int) -> List[Interview]:
        result = await db.execute(
            select(Interview)
            .options(
                selectinload(Interview.application),
                selectinload(Interview.job),
            )
            .where(InterviewRepository._visible_to(hr_user_id))
            .order_by(Interview.interview_date.asc(), Interview.scheduled_at.asc())
        )
        return result.scalars().all()

    @staticmethod
    async def count_upcoming_for_hr(db: AsyncSession, hr_user_id: int, now: datetime) -> int:
        result = await db.execute(
            select(func.count(Interview.interview_id))
            .where(
                InterviewRepository._visible_to(hr_user_id),
                Interview.status == InterviewStatus.SCHEDULED.value,
                Interview.scheduled_at >= now
            )
        )
        return result.scalar() or 0
