from typing import Optional
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.database import get_db
from app.services.auth.auth_service import candidate_required, get_current_user
from app.services.skill_extraction_service import get_skill_extraction_service
from app.services.upload_service import get_upload_service
from app.schemas.skill_schema import SkillExtractionRequest, SkillExtractionResponse, UploadResponse

router = APIRouter()


@router.post("/upload-resume", response_model=UploadResponse)
async def upload_resume(
    request: Request,
    filename: Optional[str] = Query(None),
    current_user=Depends(get_current_user)
):
    """Store the raw request body as the caller's resume file."""
    url = await get_upload_service().save_resume(current_user.user_id, filename, request.stream())
    return {"url": url}


@router.post("/extract-skills", response_model=SkillExtractionResponse)
async def extract_skills(
    data: SkillExtractionRequest,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(candidate_required)
):
    skills = await get_skill_extraction_service().extract_skills(
        current_user, data.resume_url, data.mime_type, db)
    return {"message": "Skills extracted and saved successfully!", "skills": skills}
