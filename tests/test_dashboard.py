"""Tests for the /admin dashboard view and the CSV export."""

import csv
import io
from datetime import datetime

import pytest

from app.database import APPLICATIONS_COLLECTION, RECRUITMENT_STATUS_COLLECTION
from app.models.application import Application
from app.models.recruitment_status import RECRUITMENT_STATUS_ID
from app.utils.export import export_applications_to_csv, export_filename

from conftest import application_document, seed

CSV_COLUMNS = [
    "SubmissionDate",
    "FullName",
    "NIM",
    "Major",
    "LnTClass",
    "PositionApplied",
    "BinusianEmail",
    "PrivateEmail",
    "ResumeURL",
]


@pytest.fixture
def seeded(mongo_db):
    seed(
        mongo_db,
        APPLICATIONS_COLLECTION,
        application_document(name="Alice Tan", nim="2301000001", days_ago=2, lntClass="C Programming"),
        application_document(name="Budi Santoso", nim="2301000002", days_ago=1, position="Java Programming"),
        application_document(name="Citra Lestari", nim="2301000003", days_ago=0, major="Data Science"),
    )


def test_dashboard_lists_everything_newest_first(admin_client, seeded):
    response = admin_client.get("/admin")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 3
    assert body["showing"] == 3
    assert body["isRecruitmentOpen"] is True
    assert body["sort"] == {"key": "submissionDate", "direction": "desc"}
    assert [a["fullName"] for a in body["applications"]] == ["Citra Lestari", "Budi Santoso", "Alice Tan"]


def test_dashboard_applies_search_sort_and_filters(admin_client, seeded):
    response = admin_client.get(
        "/admin",
        params={"search": "230100000", "sort": "fullName", "direction": "asc", "lnt_class": ["UI/UX Design"]},
    )

    body = response.json()
    assert body["total"] == 3
    assert body["showing"] == 2
    assert [a["fullName"] for a in body["applications"]] == ["Budi Santoso", "Citra Lestari"]


def test_dashboard_position_filter_is_repeatable(admin_client, seeded):
    response = admin_client.get("/admin", params={"position": ["Java Programming", "C Programming"]})

    assert [a["fullName"] for a in response.json()["applications"]] == ["Budi Santoso"]


def test_dashboard_reports_closed_recruitment(admin_client, seeded, mongo_db):
    seed(mongo_db, RECRUITMENT_STATUS_COLLECTION, {"_id": RECRUITMENT_STATUS_ID, "isRecruitmentOpen": False})

    assert admin_client.get("/admin").json()["isRecruitmentOpen"] is False


def test_dashboard_rejects_unknown_sort_column(admin_client, seeded):
    response = admin_client.get("/admin", params={"sort": "password"})

    assert response.status_code == 400


def test_dashboard_rejects_unknown_direction(admin_client, seeded):
    response = admin_client.get("/admin", params={"direction": "up"})

    assert response.status_code == 400


def test_export_downloads_filtered_view(admin_client, seeded):
    response = admin_client.get("/admin/export", params={"search": "data", "sort": "fullName", "direction": "asc"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert response.headers["content-disposition"] == f"attachment; filename={export_filename()}.csv"
    rows = list(csv.DictReader(io.StringIO(response.text)))
    assert [row["FullName"] for row in rows] == ["Citra Lestari"]


def test_export_columns_and_values():
    application = Application(
        id="abc",
        full_name="Jane Doe",
        nim="2301700000",
        major="CS",
        lnt_class="UI/UX Design",
        position="Back-end Development",
        binusian_email="jane.doe@binus.ac.id",
        private_email="jane@gmail.com",
        resume_url="https://files.example.com/cv.pdf",
        submission_date=datetime(2026, 10, 19, 23, 59, 59),
    )

    reader = csv.DictReader(io.StringIO(export_applications_to_csv([application])))

    assert reader.fieldnames == CSV_COLUMNS
    assert list(reader) == [
        {
            "SubmissionDate": "2026-10-19",
            "FullName": "Jane Doe",
            "NIM": "2301700000",
            "Major": "CS",
            "LnTClass": "UI/UX Design",
            "PositionApplied": "Back-end Development",
            "BinusianEmail": "jane.doe@binus.ac.id",
            "PrivateEmail": "jane@gmail.com",
            "ResumeURL": "https://files.example.com/cv.pdf",
        }
    ]


def test_export_filename_uses_date():
    assert export_filename(datetime(2026, 10, 19)) == "praetorian_applications_2026-10-19"
