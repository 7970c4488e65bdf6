from datetime import timedelta

import pytest

from conftest import application_payload, future_date
from app.core.exceptions import ConflictError, DeadlinePassedError
from app.core.timeutils import parse_deadline
from app.models.application import ApplicationStatus
from app.models.job import JobStatus
from app.models.user import UserRole
from app.repositories.application_repo import ApplicationRepository
from app.repositories.job_repo import JobRepository
from app.repositories.user_repo import create_user
from app.schemas.application_schema import ApplicationCreate
from app.services.application_service import get_application_service


def test_submit_application(client, candidate_headers, job):
    response = client.post("/applications", json=application_payload(job["job_id"]), headers=candidate_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Application submitted successfully!"
    assert body["application"]["status"] == "applied"
    assert body["application"]["job_id"] == job["job_id"]


def test_duplicate_application_is_a_conflict(client, hr_headers, candidate_headers, application):
    response = client.post("/applications", json=application_payload(application["job_id"]),
                           headers=candidate_headers)

    assert response.status_code == 409
    assert response.json()["detail"] == "You have already applied for this job."
    assert len(client.get("/user/applications", headers=candidate_headers).json()) == 1
    assert len(client.get("/hr/applicants", headers=hr_headers).json()) == 1


def test_missing_required_fields(client, candidate_headers, job):
    payload = application_payload(job["job_id"], full_name="", resume_url=None)

    response = client.post("/applications", json=payload, headers=candidate_headers)

    assert response.status_code == 400
    assert response.json()["detail"].startswith("Missing required application fields")


def test_invalid_contact_email(client, candidate_headers, job):
    payload = application_payload(job["job_id"], contact_email="asha-at-example")

    response = client.post("/applications", json=payload, headers=candidate_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid email format for contact email."


def test_unknown_job(client, candidate_headers):
    response = client.post("/applications", json=application_payload(404), headers=candidate_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "Job not Found!"


def test_hr_cannot_apply(client, hr_headers, job):
    response = client.post("/applications", json=application_payload(job["job_id"]), headers=hr_headers)
    assert response.status_code == 401


def test_candidate_feed_marks_applied_jobs(client, candidate_headers, other_candidate_headers, application):
    mine = client.get("/user/jobs", headers=candidate_headers).json()
    theirs = client.get("/user/jobs", headers=other_candidate_headers).json()

    assert mine[0]["has_applied"] is True
    assert mine[0]["user_application_status"] == "applied"
    assert theirs[0]["has_applied"] is False


def test_candidate_sees_own_applications_with_job(client, candidate_headers, other_candidate_headers, application):
    response = client.get("/user/applications", headers=candidate_headers)

    assert response.status_code == 200
    assert response.json()[0]["job"]["job_title"] == "Backend Engineer"
    assert client.get("/user/applications", headers=other_candidate_headers).json() == []


def test_hr_sees_only_applicants_to_own_jobs(client, hr_headers, other_hr_headers, application):
    mine = client.get("/hr/applicants", headers=hr_headers).json()

    assert [a["application_id"] for a in mine] == [application["application_id"]]
    assert mine[0]["user"]["email"] == "asha@example.com"
    assert client.get("/hr/applicants", headers=other_hr_headers).json() == []


def test_applicant_detail(client, hr_headers, application):
    response = client.get(f"/hr/applicants/{application['application_id']}", headers=hr_headers)

    assert response.status_code == 200
    assert response.json()["job"]["poster"]["email"] == "priya@acme.com"
    assert client.get("/hr/applicants/999", headers=hr_headers).status_code == 404


def test_status_update(client, hr_headers, candidate_headers, application):
    path = f"/hr/applicants/{application['application_id']}"

    response = client.patch(path, json={"status": "reviewed"}, headers=hr_headers)

    assert response.status_code == 200
    assert response.json()["applicant"]["status"] == "reviewed"
    assert client.get("/user/applications", headers=candidate_headers).json()[0]["status"] == "reviewed"


@pytest.mark.parametrize("status", ["archived", "", None, "Applied"])
def test_status_update_rejects_values_outside_the_set(client, hr_headers, application, status):
    response = client.patch(f"/hr/applicants/{application['application_id']}",
                            json={"status": status}, headers=hr_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid or missing status for update."


def test_status_update_unknown_applicant(client, hr_headers):
    response = client.patch("/hr/applicants/999", json={"status": "hired"}, headers=hr_headers)
    assert response.status_code == 404


def test_status_set_is_closed():
    assert ApplicationStatus.values() == ["applied", "reviewed", "interviewed", "offer", "hired", "rejected"]


async def _seed_job(db):
    hr = await create_user(db, "Priya Sharma", "priya@acme.com", None, UserRole.hr, company="Acme")
    deadline = parse_deadline(future_date(3))
    job = await JobRepository(db).create_job({
        "job_title": "QA Engineer", "num_openings": 1, "min_salary": 1, "max_salary": 2,
        "job_mode": "Hybrid", "job_description": "Testing.", "deadline": deadline,
        "status": JobStatus.ACTIVE.value,
    }, posted_by=hr.user_id)
    return job, deadline


async def test_deadline_boundary(db):
    job, deadline = await _seed_job(db)
    on_time = await create_user(db, "Asha Nair", "asha@example.com", None, UserRole.user)
    late = await create_user(db, "Vikram Rao", "vikram@example.com", None, UserRole.user)
    service = get_application_service()

    def form(name, email):
        return ApplicationCreate(job_id=job.job_id, full_name=name, contact_email=email,
                                 resume_url="http://testserver/uploads/resume.pdf")

    accepted = await service.submit_application(on_time, form("Asha Nair", "asha@example.com"), db, now=deadline)
    assert accepted.status == "applied"

    with pytest.raises(DeadlinePassedError):
        await service.submit_application(late, form("Vikram Rao", "vikram@example.com"), db,
                                         now=deadline + timedelta(microseconds=1))


async def test_duplicate_insert_maps_to_conflict(db):
    job, _ = await _seed_job(db)
    user = await create_user(db, "Asha Nair", "asha@example.com", None, UserRole.user)
    user_id = user.user_id
    service = get_application_service()
    form = ApplicationCreate(job_id=job.job_id, full_name="Asha Nair", contact_email="asha@example.com",
                             resume_url="http://testserver/uploads/resume.pdf")

    await service.submit_application(user, form, db)
    with pytest.raises(ConflictError):
        await service.submit_application(user, form, db)

    # The rollback expired the loaded user, query by id
    assert len(await ApplicationRepository.get_applications_for_user(db, user_id)) == 1
