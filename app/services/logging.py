import logging
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from app.models import AuditLog

logger = logging.getLogger(__name__)


async def log_major_event(db: AsyncSession, action: str, status: str, actor_id: Optional[int] = None,
                          details: Optional[str] = None, entity_type: Optional[str] = None,
                          entity_id=None) -> AuditLog:
    """
    Record a business event in the audit log, on the caller's session.
    Use 'await log_major_event(db, ...)' after the action itself has been committed.
    """
    entry = AuditLog(
        action=action,
        status=status,
        actor_id=actor_id,
        details=details,
        entity_type=entity_type,
        entity_id=str(entity_id) if entity_id is not None else None,
    )
    try:
        db.add(entry)
        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.error(f"Audit log write failed for action={action}: {e}")
        raise
    logger.info(f"Audit event: action={action}, status={status}, actor={actor_id}, entity={entity_type}:{entity_id}")
    return entry
