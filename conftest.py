import os
import tempfile
from datetime import date, timedelta
from unittest.mock import MagicMock

# Settings are read at import time
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="jobotics-uploads-")
os.environ["PUBLIC_BASE_URL"] = "http://testserver"
for key in ("OPENAI_API_KEY", "SENDGRID_API_KEY", "GOOGLE_CALENDAR_CLIENT_ID",
            "GOOGLE_CALENDAR_CLIENT_SECRET", "GOOGLE_REFRESH_TOKEN"):
    os.environ[key] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

import app.models  # noqa: F401
from app.db.base import Base
from app.db.database import get_db
from app.services.interview_service import interview_service
from main import app

HR_ACCOUNT = {
    "name": "Priya Sharma",
    "email": "priya@acme.com",
    "phone": "+919876543210",
    "company": "Acme Corp",
    "password": "hr-password-1",
}
OTHER_HR_ACCOUNT = {
    "name": "Rahul Verma",
    "email": "rahul@globex.com",
    "phone": "+919876543211",
    "company": "Globex",
    "password": "hr-password-2",
}
CANDIDATE_ACCOUNT = {
    "name": "Asha Nair",
    "email": "asha@example.com",
    "phone": "+919812345678",
    "password": "candidate-pass",
}
OTHER_CANDIDATE_ACCOUNT = {
    "name": "Vikram Rao",
    "email": "vikram@example.com",
    "phone": "+919812345679",
    "password": "candidate-pass-2",
}
MEET_LINK = "https://meet.google.com/abc-defg-hij"


def future_date(days: int = 30) -> str:
    return (date.today() + timedelta(days=days)).isoformat()


def job_payload(**overrides) -> dict:
    payload = {
        "job_title": "Backend Engineer",
        "num_openings": 2,
        "min_salary": 800000,
        "max_salary": 1500000,
        "job_mode": "Remote",
        "job_description": "Build and operate our hiring APIs.",
        "deadline": future_date(),
    }
    payload.update(overrides)
    return payload


def application_payload(job_id: int, **overrides) -> dict:
    payload = {
        "job_id": job_id,
        "full_name": "Asha Nair",
        "contact_email": "asha@example.com",
        "phone_number": "+919812345678",
        "cover_letter": "I would love to join.",
        "resume_url": "http://testserver/uploads/1/resume.pdf",
    }
    payload.update(overrides)
    return payload


def interview_payload_for(application: dict, **overrides) -> dict:
    payload = {
        "applicant_id": application["application_id"],
        "job_id": application["job_id"],
        "interview_date": future_date(7),
        "interview_time": "02:30 PM",
        "interview_type": "Technical",
        "notes": "Bring a laptop.",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def session_factory(tmp_path):
    db_path = tmp_path / "test.db"
    schema_engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(schema_engine)
    schema_engine.dispose()
    # NullPool so each event loop opens its own connection
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    return sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def signup_and_login(client, path: str, account: dict, role: str) -> dict:
    response = client.post(path, json=account)
    assert response.status_code == 201, response.text
    response = client.post("/auth/login", json={
        "email": account["email"], "password": account["password"], "role": role
    })
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def hr_headers(client):
    return signup_and_login(client, "/auth/hr/signup", HR_ACCOUNT, "hr")


@pytest.fixture
def other_hr_headers(client):
    return signup_and_login(client, "/auth/hr/signup", OTHER_HR_ACCOUNT, "hr")


@pytest.fixture
def candidate_headers(client):
    return signup_and_login(client, "/auth/user/signup", CANDIDATE_ACCOUNT, "user")


@pytest.fixture
def other_candidate_headers(client):
    return signup_and_login(client, "/auth/user/signup", OTHER_CANDIDATE_ACCOUNT, "user")


@pytest.fixture
def job(client, hr_headers):
    response = client.post("/hr/jobs", json=job_payload(), headers=hr_headers)
    assert response.status_code == 201, response.text
    return response.json()["job"]


@pytest.fixture
def application(client, job, candidate_headers):
    response = client.post("/applications", json=application_payload(job["job_id"]), headers=candidate_headers)
    assert response.status_code == 201, response.text
    return response.json()["application"]


@pytest.fixture
def calendar_mock(monkeypatch):
    mock = MagicMock()
    mock.create_meeting.return_value = MEET_LINK
    monkeypatch.setattr(interview_service, "_calendar_service", mock)
    return mock


@pytest.fixture
def mailer_mock(monkeypatch):
    mock = MagicMock()
    mock.send_interview_invitation.return_value = 202
    monkeypatch.setattr(interview_service, "_notification_service", mock)
    return mock
