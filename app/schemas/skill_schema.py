from pydantic import BaseModel
from typing import List, Optional


class SkillExtractionRequest(BaseModel):
    resume_url: Optional[str] = None
    mime_type: Optional[str] = None


class SkillExtractionResponse(BaseModel):
    message: str
    skills: List[str]


class UploadResponse(BaseModel):
    url: str
