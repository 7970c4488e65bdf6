from datetime import date, timedelta

from conftest import MEET_LINK, application_payload, interview_payload_for, job_payload


def test_job_to_interview_flow(client, hr_headers, candidate_headers, calendar_mock, mailer_mock):
    tomorrow = (date.today() + timedelta(days=1)).isoformat()

    # HR posts a job that closes tomorrow
    job = client.post("/hr/jobs", json=job_payload(deadline=tomorrow), headers=hr_headers).json()["job"]

    # Candidate finds it and applies with an uploaded resume
    feed = client.get("/user/jobs", headers=candidate_headers).json()
    assert [j["job_id"] for j in feed] == [job["job_id"]]
    resume_url = client.post("/upload-resume", params={"filename": "resume.pdf"},
                             content=b"%PDF-1.4", headers=candidate_headers).json()["url"]
    application = client.post("/applications", json=application_payload(job["job_id"], resume_url=resume_url),
                              headers=candidate_headers).json()["application"]
    assert application["resume_url"] == resume_url

    # HR reviews the applicant
    applicants = client.get("/hr/applicants", headers=hr_headers).json()
    assert applicants[0]["application_id"] == application["application_id"]
    reviewed = client.patch(f"/hr/applicants/{application['application_id']}", json={"status": "reviewed"},
                            headers=hr_headers)
    assert reviewed.json()["applicant"]["status"] == "reviewed"

    # and schedules an interview for tomorrow morning
    payload = interview_payload_for(application, interview_date=tomorrow, interview_time="10:00AM")
    scheduled = client.post("/hr/interviews", json=payload, headers=hr_headers)
    assert scheduled.status_code == 201
    assert scheduled.json()["meet_link"] == MEET_LINK
    assert scheduled.json()["interview"]["interview_date"] == tomorrow
    meeting = calendar_mock.create_meeting.call_args.kwargs
    assert (meeting["start"].hour, meeting["start"].minute) == (10, 0)

    mine = client.get("/user/applications", headers=candidate_headers).json()
    assert mine[0]["status"] == "interviewed"
    feed = client.get("/user/jobs", headers=candidate_headers).json()
    assert feed[0]["has_applied"] is True
    assert feed[0]["user_application_status"] == "interviewed"
    interviews = client.get("/hr/interviews", headers=hr_headers).json()
    assert interviews[0]["meet_link"] == MEET_LINK
    actions = [entry["action"] for entry in client.get("/logs", headers=hr_headers).json()]
    assert actions == ["interview_scheduled", "application_status_updated", "job_created"]
