from pydantic import BaseModel
from datetime import datetime
from typing import Optional

class AuditLogSchema(BaseModel):
    id: int
    timestamp: datetime
    action: str
    status: str
    details: Optional[str] = None
    actor_id: Optional[int] = None
    entity_type: Optional[str] = None
    entity_id: Optional[str] = None

    class Config:
        from_attributes = True
