"""Test configuration and fixtures."""

import asyncio
import json
import os
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.utils.security import get_password_hash

# Test configuration
ADMIN_EMAIL = "stanley.teguh@binus.ac.id"
ADMIN_PASSWORD = "correct-horse-battery"

os.environ["JWT_SECRET"] = "test-signing-secret"
os.environ["APP_ENV"] = "development"
os.environ["ADMIN_CREDENTIALS"] = json.dumps({ADMIN_EMAIL: get_password_hash(ADMIN_PASSWORD)})

from app import database  # noqa: E402
from app.config import SESSION_COOKIE_NAME  # noqa: E402
from app.errors import ResumeUploadError  # noqa: E402
from app.main import app  # noqa: E402
from app.utils.auth import create_access_token  # noqa: E402
from app.utils.storage import get_resume_storage  # noqa: E402


class RecordingStorage:
    """Resume storage double that remembers every upload."""

    def __init__(self):
        self.uploads = []
        self.fail = False

    async def upload(self, filename, contents, content_type):
        if self.fail:
            raise ResumeUploadError("File upload failed.")
        self.uploads.append({"filename": filename, "size": len(contents), "content_type": content_type})
        return f"https://files.example.com/recruitment_cvs/{len(self.uploads)}_{filename}"


def valid_form(**overrides):
    form = {
        "fullName": "Jane Doe",
        "nim": "2301700000",
        "major": "CS",
        "lntClass": "UI/UX Design",
        "position": "UI/UX Design",
        "binusianEmail": "jane.doe@binus.ac.id",
        "privateEmail": "jane@gmail.com",
    }
    form.update(overrides)
    return form


def application_document(name="Jane Doe", days_ago=0, **overrides):
    document = {
        "fullName": name,
        "nim": "2301700000",
        "major": "CS",
        "lntClass": "UI/UX Design",
        "position": "UI/UX Design",
        "binusianEmail": "jane.doe@binus.ac.id",
        "privateEmail": "jane@gmail.com",
        "resumeUrl": "https://files.example.com/recruitment_cvs/cv.pdf",
        "submissionDate": datetime(2024, 1, 15, 12, 0, 0) - timedelta(days=days_ago),
    }
    document.update(overrides)
    return document


@pytest.fixture
def mongo_db(monkeypatch):
    """In-memory Motor database patched in as the app database."""
    db = AsyncMongoMockClient()["praetorian_test"]
    monkeypatch.setattr(database, "db", db)
    return db


@pytest.fixture
def storage():
    recording = RecordingStorage()
    app.dependency_overrides[get_resume_storage] = lambda: recording
    yield recording
    app.dependency_overrides.pop(get_resume_storage, None)


@pytest.fixture
def client(mongo_db, storage):
    # Not used as a context manager, so the startup MongoDB connection is skipped
    return TestClient(app)


@pytest.fixture
def admin_client(client):
    client.cookies.set(SESSION_COOKIE_NAME, create_access_token(ADMIN_EMAIL))
    return client


def seed(db, collection, *documents):
    """Insert documents from a synchronous test."""
    asyncio.run(db[collection].insert_many(list(documents)))
    return documents
