from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.database import get_db
from app.services.auth.auth_service import hr_required
from app.services.job_service import get_job_service
from app.schemas.job_schema import (
    JobCreate, JobUpdate, JobResponse, JobDetailResponse, JobMutationResponse
)

router = APIRouter()
job_service = get_job_service()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=JobMutationResponse)
async def create_job(
    data: JobCreate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(hr_required)
):
    job = await job_service.create_job(current_user, data, db)
    return {"message": "Job posted successfully!", "job": job}


@router.get("", response_model=List[JobResponse])
async def list_jobs(db: AsyncSession = Depends(get_db), current_user=Depends(hr_required)):
    """Job openings posted by the calling HR user, newest first."""
    return await job_service.list_jobs(current_user, db)


@router.get("/{job_id}", response_model=JobDetailResponse)
async def get_job(job_id: int, db: AsyncSession = Depends(get_db), current_user=Depends(hr_required)):
    return await job_service.get_job(job_id, db)


@router.patch("/{job_id}", response_model=JobMutationResponse)
async def update_job(
    job_id: int,
    data: JobUpdate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(hr_required)
):
    job = await job_service.update_job(current_user, job_id, data, db)
    return {"message": "Job updated successfully!", "job": job}


@router.delete("/{job_id}", response_model=JobMutationResponse)
async def delete_job(job_id: int, db: AsyncSession = Depends(get_db), current_user=Depends(hr_required)):
    job = await job_service.delete_job(current_user, job_id, db)
    return {"message": "Job deleted successfully!", "job": job}
