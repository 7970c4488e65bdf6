from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.database import get_db
from app.services.auth.auth_service import candidate_required
from app.services.application_service import get_application_service
from app.schemas.application_schema import ApplicationCreate, ApplicationSubmitResponse

router = APIRouter()
application_service = get_application_service()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ApplicationSubmitResponse)
async def submit_application(
    data: ApplicationCreate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(candidate_required)
):
    application = await application_service.submit_application(current_user, data, db)
    return {"message": "Application submitted successfully!", "application": application}
