"""
Skill Extraction.

Fetches a candidate's resume, turns it into plain text, asks the language
model for a JSON array of skills and stores the result on the account.
Imperfect model output is recovered locally rather than reported as an error.
"""
import asyncio
import io
import json
import logging
import re
from typing import Callable, List, Optional
import pdfplumber
import requests
from docx import Document
from langchain_openai import ChatOpenAI
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import settings
from app.core.exceptions import FetchError, UnsupportedFormatError, UpstreamError, ValidationError
from app.models.user import User
from app.repositories.user_repo import set_user_skills
from app.services.logging import log_major_event
from app.services.prompts import SKILL_EXTRACTION_PROMPT, SKILL_EXTRACTION_SYSTEM_PROMPT

logger = logging.getLogger(__name__)

PDF_MIME_TYPES = {"application/pdf"}
WORD_MIME_TYPES = {
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/msword",
}
FALLBACK_DELIMITERS = re.compile(r"[\n,;]+")
CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


def get_llm():
    """Get LLM instance lazily to avoid initialization issues during import."""
    return ChatOpenAI(
        model=settings.OPENAI_MODEL,
        temperature=0,
        api_key=settings.OPENAI_API_KEY,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
    )


def _normalize_mime_type(mime_type: str) -> str:
    return mime_type.split(";", 1)[0].strip().lower()


def parse_skills_response(text: Optional[str]) -> List[str]:
    """
    Read the model's answer as a JSON array of strings, falling back to
    splitting on newlines, commas and semicolons.
    """
    cleaned = CODE_FENCE.sub("", (text or "").strip())
    try:
        parsed = json.loads(cleaned)
    except ValueError:
        parsed = None

    if isinstance(parsed, list) and all(isinstance(item, str) for item in parsed):
        candidates = parsed
    else:
        logger.warning(f"Model did not return a JSON string array, using fallback split: {cleaned[:200]!r}")
        candidates = FALLBACK_DELIMITERS.split(cleaned)

    skills = []
    for item in candidates:
        skill = item.strip()
        if skill and skill not in skills:
            skills.append(skill)
    return skills


class SkillExtractionService:
    def __init__(self, llm_factory: Optional[Callable] = None):
        self.llm_factory = llm_factory or get_llm

    def fetch_resume(self, resume_url: str) -> bytes:
        try:
            response = requests.get(resume_url, timeout=settings.HTTP_TIMEOUT_SECONDS)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Failed to fetch resume from {resume_url}: {e}")
            raise FetchError(f"Failed to fetch resume from URL: {e}")
        return response.content

    def extract_text(self, content: bytes, mime_type: str) -> str:
        mime_type = _normalize_mime_type(mime_type)
        try:
            if mime_type in PDF_MIME_TYPES:
                with pdfplumber.open(io.BytesIO(content)) as pdf:
                    text = "\n".join(page.extract_text() or "" for page in pdf.pages)
            elif mime_type in WORD_MIME_TYPES:
                document = Document(io.BytesIO(content))
                text = "\n".join(p.text for p in document.paragraphs if p.text.strip())
            elif mime_type.startswith("text/"):
                text = content.decode("utf-8", errors="replace")
            else:
                raise UnsupportedFormatError(mime_type)
        except UnsupportedFormatError:
            raise
        except Exception as e:
            logger.error(f"Error parsing resume content ({mime_type}): {e}")
            raise FetchError(
                f"Failed to read or parse resume content: {e}. Ensure it's a valid PDF/DOCX.")

        text = text.strip()
        if len(text) < 50:
            logger.warning("Resume text is very short, it might be invalid or empty.")
        return text

    def request_skills(self, resume_text: str) -> str:
        """Ask the model for skills and return its raw answer."""
        messages = [
            {"role": "system", "content": SKILL_EXTRACTION_SYSTEM_PROMPT},
            {"role": "user", "content": SKILL_EXTRACTION_PROMPT.format(resume_text=resume_text)},
        ]
        try:
            result = self.llm_factory().invoke(messages)
        except Exception as e:
            logger.error(f"Error calling the language model: {e}")
            raise UpstreamError(f"Failed to extract skills using AI: {e}")
        content = getattr(result, "content", result)
        return content if isinstance(content, str) else json.dumps(content)

    async def extract_skills(self, user: User, resume_url: Optional[str], mime_type: Optional[str],
                             db: AsyncSession) -> List[str]:
        if not resume_url or not mime_type:
            raise ValidationError(
                "Resume URL and MIME type are required for skill extraction.",
                fields=["resume_url", "mime_type"])
        if not settings.OPENAI_API_KEY:
            logger.error("OPENAI_API_KEY is not set in environment variables.")
            raise UpstreamError("Server configuration error: OpenAI API key missing.")

        normalized = _normalize_mime_type(mime_type)
        if not (normalized in PDF_MIME_TYPES or normalized in WORD_MIME_TYPES or normalized.startswith("text/")):
            raise UnsupportedFormatError(mime_type)

        user_id = user.user_id
        content = await asyncio.to_thread(self.fetch_resume, resume_url)
        resume_text = await asyncio.to_thread(self.extract_text, content, normalized)
        raw = await asyncio.to_thread(self.request_skills, resume_text)
        skills = parse_skills_response(raw)
        logger.info(f"Extracted {len(skills)} skills for user {user_id}")

        await set_user_skills(db, user_id, skills)
        await log_major_event(
            db, action="skills_extracted", status="success", actor_id=user_id,
            details=f"{len(skills)} skills extracted from resume.", entity_type="user", entity_id=user_id
        )
        return skills


skill_extraction_service = SkillExtractionService()

def get_skill_extraction_service() -> SkillExtractionService:
    return skill_extraction_service
