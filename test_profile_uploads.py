import os

import pytest

from conftest import CANDIDATE_ACCOUNT, HR_ACCOUNT
from app.core.config import settings
from app.services.upload_service import UploadService, get_upload_service


def test_upload_resume(client, candidate_headers):
    user_id = client.get("/auth/me", headers=candidate_headers).json()["user_id"]

    response = client.post("/upload-resume", params={"filename": "my cv.pdf"},
                           content=b"%PDF-1.4 resume", headers=candidate_headers)

    assert response.status_code == 200
    url = response.json()["url"]
    assert url.startswith(f"http://testserver/uploads/{user_id}/")
    assert url.endswith("-my_cv.pdf")
    stored = os.path.join(settings.UPLOAD_DIR, str(user_id), url.rsplit("/", 1)[1])
    with open(stored, "rb") as f:
        assert f.read() == b"%PDF-1.4 resume"
    assert client.get(url.replace("http://testserver", "")).content == b"%PDF-1.4 resume"


def test_upload_strips_directories_from_filename(client, candidate_headers):
    response = client.post("/upload-resume", params={"filename": "../../etc/passwd"},
                           content=b"x", headers=candidate_headers)

    assert response.status_code == 200
    assert response.json()["url"].endswith("-passwd")


def test_upload_requires_filename_and_body(client, candidate_headers):
    assert client.post("/upload-resume", content=b"data", headers=candidate_headers).status_code == 400
    response = client.post("/upload-resume", params={"filename": "cv.pdf"}, content=b"", headers=candidate_headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "Request body is empty"


def test_upload_size_limit(client, candidate_headers, monkeypatch):
    monkeypatch.setattr(get_upload_service(), "max_bytes", 8)

    response = client.post("/upload-resume", params={"filename": "cv.pdf"},
                           content=b"0123456789", headers=candidate_headers)

    assert response.status_code == 400


def test_upload_requires_authentication(client):
    assert client.post("/upload-resume", params={"filename": "cv.pdf"}, content=b"x").status_code == 401


def test_get_profile(client, candidate_headers):
    response = client.get("/user/profile", headers=candidate_headers)

    assert response.status_code == 200
    profile = response.json()
    assert profile["phone"] == CANDIDATE_ACCOUNT["phone"]
    assert profile["skills"] is None
    assert "hashed_password" not in profile


def test_update_profile(client, candidate_headers):
    response = client.patch("/user/profile", json={"name": "Asha N.", "phone": "+911234567890"},
                            headers=candidate_headers)

    assert response.status_code == 200
    assert response.json()["name"] == "Asha N."
    assert response.json()["phone"] == "+911234567890"


def test_change_password(client, candidate_headers):
    response = client.patch("/user/profile", json={
        "current_password": CANDIDATE_ACCOUNT["password"], "new_password": "brand-new-pass"
    }, headers=candidate_headers)
    assert response.status_code == 200

    login = client.post("/auth/login", json={
        "email": CANDIDATE_ACCOUNT["email"], "password": "brand-new-pass", "role": "user"
    })
    assert login.status_code == 200


def test_change_password_needs_current_password(client, candidate_headers):
    wrong = client.patch("/user/profile", json={
        "current_password": "not-my-password", "new_password": "brand-new-pass"
    }, headers=candidate_headers)
    missing = client.patch("/user/profile", json={"new_password": "brand-new-pass"}, headers=candidate_headers)

    assert wrong.status_code == 400
    assert wrong.json()["detail"] == "Current password is incorrect."
    assert missing.status_code == 400


def test_email_taken_by_another_account(client, candidate_headers, hr_headers):
    response = client.patch("/user/profile", json={"email": HR_ACCOUNT["email"]}, headers=candidate_headers)
    assert response.status_code == 409


async def test_failed_stream_leaves_no_partial_file(tmp_path):
    service = UploadService(upload_dir=str(tmp_path), base_url="http://testserver", max_bytes=1024)

    async def broken_stream():
        yield b"%PDF-1.4 first chunk"
        raise OSError("client disconnected")

    with pytest.raises(OSError):
        await service.save_resume(7, "cv.pdf", broken_stream())

    assert os.listdir(tmp_path / "7") == []
