#!/usr/bin/env python3
"""
Create an HR and a candidate account against a running server for manual API testing
"""

import requests

BASE_URL = "http://127.0.0.1:8000"

ACCOUNTS = [
    ("/auth/hr/signup", {
        "name": "Test Recruiter",
        "email": "hr@company.com",
        "phone": "+919876543210",
        "company": "Test Company",
        "password": "recruiter123",
    }),
    ("/auth/user/signup", {
        "name": "Test Candidate",
        "email": "candidate@example.com",
        "phone": "+919812345678",
        "password": "candidate123",
    }),
]


def create_account(path, data):
    response = requests.post(f"{BASE_URL}{path}", json=data, timeout=15)
    print(f"{path} -> {response.status_code}")

    if response.status_code == 201:
        user = response.json()["user"]
        print(f"Created user: {user['name']} ({user['role']})")
        return True
    if response.status_code == 409:
        print(f"{data['email']} already exists")
        return True
    print(f"Signup response: {response.text}")
    return False

if __name__ == "__main__":
    print("Creating test accounts...")
    ok = all(create_account(path, data) for path, data in ACCOUNTS)
    print("Test accounts ready" if ok else "Failed to create test accounts")
