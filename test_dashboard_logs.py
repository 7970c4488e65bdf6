from conftest import interview_payload_for, job_payload


def test_dashboard_summary(client, hr_headers, application, calendar_mock, mailer_mock):
    second = client.post("/hr/jobs", json=job_payload(job_title="Designer"), headers=hr_headers).json()["job"]
    client.patch(f"/hr/jobs/{second['job_id']}", json=job_payload(job_title="Designer", status="closed"),
                 headers=hr_headers)
    client.post("/hr/interviews", json=interview_payload_for(application), headers=hr_headers)

    response = client.get("/hr/dashboard/summary", headers=hr_headers)

    assert response.status_code == 200
    summary = response.json()
    assert summary["total_jobs"] == 2
    assert summary["active_jobs"] == 1
    assert summary["jobs_by_status"] == {"active": 1, "closed": 1, "draft": 0}
    assert summary["total_applicants"] == 1
    funnel = {stage["stage"]: stage["count"] for stage in summary["applicant_funnel"]}
    assert funnel["interviewed"] == 1
    assert funnel["applied"] == 0
    assert summary["upcoming_interviews"] == 1
    assert [j["job_title"] for j in summary["recent_jobs"]] == ["Designer", "Backend Engineer"]
    assert summary["recent_jobs"][1]["applicant_count"] == 1


def test_dashboard_is_hr_only(client, candidate_headers):
    assert client.get("/hr/dashboard/summary", headers=candidate_headers).status_code == 401


def test_logs_list_own_events_newest_first(client, hr_headers, other_hr_headers, job):
    client.delete(f"/hr/jobs/{job['job_id']}", headers=hr_headers)

    response = client.get("/logs", headers=hr_headers)

    assert response.status_code == 200
    assert [entry["action"] for entry in response.json()] == ["job_deleted", "job_created"]
    assert response.json()[0]["entity_id"] == str(job["job_id"])
    assert client.get("/logs", headers=other_hr_headers).json() == []


def test_logs_pagination(client, hr_headers, job):
    client.patch(f"/hr/jobs/{job['job_id']}", json=job_payload(), headers=hr_headers)

    response = client.get("/logs", params={"skip": 1, "limit": 1}, headers=hr_headers)

    assert [entry["action"] for entry in response.json()] == ["job_created"]
