from __future__ import annotations

import os
import uuid

# Must be set before wedding_planner.app (and its engine) is imported.
os.environ["DB_URL"] = "sqlite://"
os.environ["GROQ_API_KEY"] = ""

import pytest  # noqa: E402


def signup_and_login(client, email: str | None = None, password: str = "secret123") -> dict:
    """Create a fresh couple account and log the client in as it."""
    email = email or f"couple-{uuid.uuid4().hex[:10]}@example.com"
    client.post("/signup", json={
        "email": email,
        "password": password,
        "partner_one_name": "Alex",
        "partner_two_name": "Sam",
    })
    resp = client.post("/auth/login", json={"email": email, "password": password})
    return resp.json()["user"]


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from wedding_planner.app import app

    return TestClient(app)


@pytest.fixture
def logged_in_client(client):
    signup_and_login(client)
    return client
