from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.database import get_db
from app.repositories.audit_log_repo import get_logs_for_actor
from app.schemas.audit_log_schema import AuditLogSchema
from app.services.auth.auth_service import hr_required

router = APIRouter()


@router.get("", response_model=List[AuditLogSchema])
async def get_logs(
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(hr_required)
):
    return await get_logs_for_actor(db, current_user.user_id, skip, limit)
