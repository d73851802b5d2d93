# /tests/test_routers.py

import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from gradebook.db.base import Base
from gradebook.main import app
from gradebook.services.database_service import DatabaseService, get_db_service
from gradebook.services.exceptions import GatewayError


@pytest.fixture
def client():
    """A TestClient whose gateway is backed by a fresh in-memory database."""
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    app.dependency_overrides[get_db_service] = lambda: DatabaseService(session)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def seeded(client):
    """Creates one class, two students and three grades through the API."""
    cls = client.post("/api/classes", json={"name": "Algebra I", "subject": "Mathematics", "term": "Fall 2024"}).json()
    alice = client.post("/api/students", json={
        "externalId": "S-001", "name": "Alice Moreno", "email": "alice@school.edu", "phone": "555-0101", "classId": cls["id"],
    }).json()
    ben = client.post("/api/students", json={
        "externalId": "S-002", "name": "Ben Okafor", "email": "ben@school.edu", "phone": "555-0102", "classId": cls["id"],
    }).json()
    grades = [
        {"studentId": alice["id"], "classId": cls["id"], "assignmentName": "Quiz 1", "category": "Quiz",
         "points": 45, "maxPoints": 50, "date": "2024-01-10"},
        {"studentId": ben["id"], "classId": cls["id"], "assignmentName": "Quiz 1", "category": "Quiz",
         "points": 35, "maxPoints": 50, "date": "2024-01-10"},
        {"studentId": alice["id"], "classId": cls["id"], "assignmentName": "Unit Test", "category": "Test",
         "points": 60, "maxPoints": 100, "date": "2024-03-01"},
    ]
    for grade in grades:
        assert client.post("/api/grades", json=grade).status_code == 201
    return {"class": cls, "alice": alice, "ben": ben}


def test_health_check(client):
    assert client.get("/").json()["status"] == "Gradebook API is running!"


def test_grade_listing_applies_threshold_and_date_filters(client, seeded):
    between = client.get("/api/grades", params={"threshold": "between", "min": 70, "max": 90}).json()
    assert [(g["studentName"], g["percentage"]) for g in between] == [("Alice Moreno", 90.0), ("Ben Okafor", 70.0)]

    after = client.get("/api/grades", params={"start": "2024-02-01"}).json()
    assert [g["assignmentName"] for g in after] == ["Unit Test"]
    assert after[0]["tier"] == "D"
    assert after[0]["badge"] == "error"


def test_grade_form_rejects_points_above_max(client, seeded):
    response = client.post("/api/grades", json={
        "studentId": seeded["alice"]["id"], "classId": seeded["class"]["id"], "assignmentName": "Bonus",
        "category": "Quiz", "points": 11, "maxPoints": 10, "date": "2024-04-01",
    })
    assert response.status_code == 422


def test_missing_entities_return_404(client):
    assert client.get("/api/grades/999").status_code == 404
    assert client.put("/api/classes/999", json={"name": "Renamed"}).status_code == 404
    assert client.delete("/api/students/999").status_code == 404
    assert client.get("/api/students/999/profile").status_code == 404


def test_duplicate_roster_id_is_a_conflict(client, seeded):
    response = client.post("/api/students", json={
        "externalId": "S-001", "name": "Someone Else", "email": "else@school.edu", "phone": "555-0199",
    })
    assert response.status_code == 409


def test_deleted_student_shows_as_unknown(client, seeded):
    assert client.delete(f"/api/students/{seeded['ben']['id']}").status_code == 204

    grades = client.get("/api/grades").json()
    assert "Unknown" in {g["studentName"] for g in grades}
    rankings = client.get("/api/reports/rankings").json()
    assert rankings[-1]["student"] is None


def test_student_listing_keeps_students_without_grades(client, seeded):
    client.post("/api/students", json={
        "externalId": "S-003", "name": "Chloe Park", "email": "chloe@school.edu", "phone": "555-0103",
    })
    result = client.get("/api/students", params={"threshold": "above", "min": 90}).json()

    assert [s["name"] for s in result] == ["Chloe Park"]
    assert result[0]["average"] is None


def test_reports(client, seeded):
    stats = client.get("/api/reports/class-stats", params={"classId": seeded["class"]["id"]}).json()
    assert stats["count"] == 3
    assert stats["distribution"] == {"A": 1, "B": 0, "C": 1, "D": 1, "F": 0}

    rankings = client.get("/api/reports/rankings").json()
    assert [r["studentName"] for r in rankings] == ["Alice Moreno", "Ben Okafor"]

    categories = client.get("/api/reports/categories").json()
    assert [c["category"] for c in categories] == ["Quiz", "Test"]


def test_class_stats_without_grades_is_null(client):
    response = client.get("/api/reports/class-stats")
    assert response.status_code == 200
    assert response.json() is None


def test_export_downloads_csv(client, seeded):
    response = client.get("/api/reports/export")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "grade_report.csv" in response.headers["content-disposition"]
    lines = response.text.strip().splitlines()
    assert lines[0] == "Student,Student ID,Class,Subject,Assignment,Category,Points,Max Points,Percentage,Date,Notes"
    assert len(lines) == 4


def test_dashboard_summary_counts(client, seeded):
    summary = client.get("/api/dashboard/summary").json()
    assert (summary["studentCount"], summary["classCount"], summary["gradeCount"]) == (2, 1, 3)
    assert summary["overallAverage"] == pytest.approx(73.33, abs=0.01)
    assert summary["recentGrades"][0]["assignmentName"] == "Unit Test"


def test_gateway_failure_becomes_a_retryable_503():
    failing_db = MagicMock()
    failing_db.load_snapshot.side_effect = GatewayError("load gradebook")
    app.dependency_overrides[get_db_service] = lambda: failing_db
    try:
        response = TestClient(app).get("/api/grades")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 503
    assert response.json()["retryable"] is True


def test_null_for_a_required_field_is_a_validation_error(client, seeded):
    class_id = seeded["class"]["id"]
    response = client.put(f"/api/classes/{class_id}", json={"name": None})
    assert response.status_code == 422

    grade_id = client.get("/api/grades").json()[0]["id"]
    response = client.put(f"/api/grades/{grade_id}", json={"points": None})
    assert response.status_code == 422

    response = client.put(f"/api/students/{seeded['alice']['id']}", json={"name": None})
    assert response.status_code == 422

    assert client.get(f"/api/classes/{class_id}").json()["name"] == "Algebra I"


def test_student_form_rejects_malformed_email(client):
    response = client.post("/api/students", json={
        "externalId": "S-009", "name": "Dana Cruz", "email": "dana@school..edu", "phone": "555-0109",
    })
    assert response.status_code == 422
