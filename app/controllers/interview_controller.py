from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.database import get_db
from app.services.auth.auth_service import hr_required
from app.services.interview_service import get_interview_service
from app.schemas.interview_schema import InterviewCreate, InterviewListItem, ScheduleInterviewResponse

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ScheduleInterviewResponse)
async def schedule_interview(
    data: InterviewCreate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(hr_required)
):
    return await get_interview_service().schedule_interview(current_user, data, db)


@router.get("", response_model=List[InterviewListItem])
async def list_interviews(db: AsyncSession = Depends(get_db), current_user=Depends(hr_required)):
    """Interviews scheduled by the caller or for the caller's jobs."""
    return await get_interview_service().list_interviews(current_user, db)
