from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.database import get_db
from app.services.auth.auth_service import hr_required
from app.services.application_service import get_application_service
from app.schemas.application_schema import (
    ApplicantResponse, ApplicantDetailResponse, ApplicationStatusUpdate, ApplicationStatusResponse
)

router = APIRouter()
application_service = get_application_service()


@router.get("", response_model=List[ApplicantResponse])
async def list_applicants(db: AsyncSession = Depends(get_db), current_user=Depends(hr_required)):
    return await application_service.list_applicants_for_hr(current_user, db)


@router.get("/{applicant_id}", response_model=ApplicantDetailResponse)
async def get_applicant(applicant_id: int, db: AsyncSession = Depends(get_db), current_user=Depends(hr_required)):
    return await application_service.get_applicant_detail(current_user, applicant_id, db)


@router.patch("/{applicant_id}", response_model=ApplicationStatusResponse)
async def update_applicant_status(
    applicant_id: int,
    data: ApplicationStatusUpdate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(hr_required)
):
    applicant = await application_service.update_application_status(current_user, applicant_id, data.status, db)
    return {"message": "Applicant status updated successfully!", "applicant": applicant}
