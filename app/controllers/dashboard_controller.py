from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.database import get_db
from app.services.auth.auth_service import hr_required
from app.services.dashboard_service import get_dashboard_summary

router = APIRouter()

@router.get("/dashboard/summary")
async def dashboard_summary(
    db: AsyncSession = Depends(get_db),
    current_user = Depends(hr_required)
):
    return await get_dashboard_summary(db, current_user.user_id)
