from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.database import get_db
from app.services.auth.auth_service import candidate_required, get_current_user
from app.services.application_service import get_application_service
from app.services.job_service import get_job_service
from app.services.profile_service import get_profile_service
from app.schemas.application_schema import CandidateApplicationResponse
from app.schemas.job_schema import CandidateJobResponse
from app.schemas.user_schema import ProfileResponse, ProfileUpdate

router = APIRouter()


@router.get("/jobs", response_model=List[CandidateJobResponse])
async def list_open_jobs(db: AsyncSession = Depends(get_db), current_user=Depends(candidate_required)):
    """Active jobs still accepting applications, flagged with the caller's own application."""
    return await get_job_service().list_open_jobs_for_candidate(current_user, db)


@router.get("/applications", response_model=List[CandidateApplicationResponse])
async def list_my_applications(db: AsyncSession = Depends(get_db), current_user=Depends(candidate_required)):
    return await get_application_service().list_applications_for_candidate(current_user, db)


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(current_user=Depends(get_current_user)):
    return current_user


@router.patch("/profile", response_model=ProfileResponse)
async def update_profile(
    data: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_user)
):
    return await get_profile_service().update_profile(current_user, data, db)
