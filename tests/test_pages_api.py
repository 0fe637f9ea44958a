from __future__ import annotations

from datetime import date

from careerhub.database import SessionLocal
from careerhub.db.gateway import DataAccessError, TableGateway
from careerhub.models import JobPosting, UserCareerGoal
from careerhub.routers.dependencies import get_gateway
from careerhub.services.career_path_service import goal_target_date
from factories import (
    add_career_path,
    add_course,
    add_job,
    add_mentor,
    add_path_skill,
    add_recruiter,
    add_skill,
    add_user_skill,
    enroll,
)


def test_skills_add_update_remove(client, user_id, auth_headers) -> None:
    headers = auth_headers(user_id)
    add_skill("s-py", name="Python", category="technical")
    add_skill("s-comm", name="Communication", category="soft")

    r = client.get("/api/skills", params={"category": "technical"}, headers=headers)
    assert [s["id"] for s in r.json()] == ["s-py"]

    r = client.post("/api/skills/me", json={"skill_id": "s-py", "proficiency_level": 2}, headers=headers)
    assert r.status_code == 201
    user_skill_id = r.json()["id"]
    assert r.json()["skill"]["name"] == "Python"

    # Already-owned skills drop out of the catalog listing.
    r = client.get("/api/skills", params={"q": "py"}, headers=headers)
    assert r.json() == []

    r = client.patch(f"/api/skills/me/{user_skill_id}", json={"proficiency_level": 4}, headers=headers)
    assert r.status_code == 200
    assert r.json()["proficiency_level"] == 4

    r = client.patch(f"/api/skills/me/{user_skill_id}", json={"proficiency_level": 9}, headers=headers)
    assert r.status_code == 422

    r = client.get("/api/skills/me", headers=headers)
    body = r.json()
    assert list(body["by_category"].keys()) == ["technical"]
    assert len(body["skills"]) == 1

    r = client.delete(f"/api/skills/me/{user_skill_id}", headers=headers)
    assert r.status_code == 204
    r = client.delete(f"/api/skills/me/{user_skill_id}", headers=headers)
    assert r.status_code == 404

    r = client.post("/api/skills/me", json={"skill_id": "missing", "proficiency_level": 1}, headers=headers)
    assert r.status_code == 404


def test_course_progress_completes_at_100(client, user_id, auth_headers) -> None:
    headers = auth_headers(user_id)
    add_course("c1", title="Python Foundations")

    r = client.post("/api/courses/c1/start", headers=headers)
    assert r.status_code == 201
    enrollment = r.json()
    assert enrollment["status"] == "in_progress"
    assert enrollment["progress_percentage"] == 0
    assert enrollment["started_at"]

    r = client.patch(f"/api/courses/enrollments/{enrollment['id']}", json={"progress_percentage": 50}, headers=headers)
    assert r.json()["status"] == "in_progress"
    assert r.json()["completed_at"] is None

    r = client.patch(f"/api/courses/enrollments/{enrollment['id']}", json={"progress_percentage": 100}, headers=headers)
    assert r.json()["status"] == "completed"
    assert r.json()["completed_at"]

    r = client.get("/api/courses", headers=headers)
    [course] = r.json()
    assert course["enrollment"]["status"] == "completed"

    r = client.patch(f"/api/courses/enrollments/{enrollment['id']}", json={"progress_percentage": 101}, headers=headers)
    assert r.status_code == 422


def test_career_paths_with_required_skills_and_goal(client, user_id, auth_headers) -> None:
    headers = auth_headers(user_id)
    add_career_path("p1", title="Data Analyst", level="entry")
    add_skill("s-sql", name="SQL")
    add_skill("s-viz", name="Data Visualization")
    add_path_skill("p1", "s-viz", 3)
    add_path_skill("p1", "s-sql", 5)

    r = client.get("/api/career-paths", headers=headers)
    body = r.json()
    [path] = body["paths"]
    assert [rs["skill"]["name"] for rs in path["required_skills"]] == ["SQL", "Data Visualization"]
    assert body["active_goal_path_ids"] == []

    r = client.post("/api/career-paths/p1/goal", headers=headers)
    assert r.status_code == 201
    assert r.json()["status"] == "active"

    r = client.get("/api/career-paths", headers=headers)
    assert r.json()["active_goal_path_ids"] == ["p1"]

    with SessionLocal() as db:
        goal = db.query(UserCareerGoal).one()
        assert goal.target_date == goal_target_date(date.today())


def test_goal_target_date_is_one_year_out() -> None:
    assert goal_target_date(date(2025, 6, 15)) == date(2026, 6, 15)
    assert goal_target_date(date(2024, 2, 29)) == date(2025, 3, 1)


def test_jobs_list_apply_and_counter(client, user_id, auth_headers) -> None:
    headers = auth_headers(user_id)
    add_recruiter("r1", company_name="Northwind")
    add_job("j1", recruiter_id="r1", title="Data Analyst", job_type="full-time", remote_allowed=True)
    add_job("j2", recruiter_id="r1", title="Closed Role", status="closed")
    add_job("j3", recruiter_id=None, title="Orphan Role")

    r = client.get("/api/jobs", headers=headers)
    assert [j["id"] for j in r.json()["jobs"]] == ["j1"]
    assert r.json()["jobs"][0]["company_name"] == "Northwind"

    r = client.get("/api/jobs", params={"q": "northwind", "remote": "false"}, headers=headers)
    assert r.json()["jobs"] == []

    r = client.post("/api/jobs/j1/apply", json={"cover_letter": "Hello"}, headers=headers)
    assert r.status_code == 201
    application = r.json()
    assert application["status"] == "pending"
    assert 70 <= application["match_score"] < 100

    r = client.get("/api/jobs", headers=headers)
    assert r.json()["applied_job_ids"] == ["j1"]
    assert r.json()["jobs"][0]["applications_count"] == 1

    r = client.get("/api/jobs/applications", headers=headers)
    assert len(r.json()) == 1

    r = client.post("/api/jobs/missing/apply", json={}, headers=headers)
    assert r.status_code == 404


class _WriteFailingGateway(TableGateway):
    async def insert(self, table, rows):
        raise DataAccessError("insert rejected by data service")


def test_application_failure_is_surfaced(client, user_id, auth_headers) -> None:
    add_recruiter("r1")
    add_job("j1", recruiter_id="r1")
    client.app.dependency_overrides[get_gateway] = lambda: _WriteFailingGateway()
    try:
        r = client.post("/api/jobs/j1/apply", json={"cover_letter": "x"}, headers=auth_headers(user_id))
    finally:
        client.app.dependency_overrides.clear()

    assert r.status_code == 503
    assert "insert rejected by data service" in r.json()["detail"]
    with SessionLocal() as db:
        assert db.get(JobPosting, "j1").applications_count == 0


def test_mentors_and_mentorship_requests(client, user_id, auth_headers) -> None:
    headers = auth_headers(user_id)
    add_mentor("m1", "mentor-1", full_name="Ada Park", rating=4.8, expertise_areas=["Machine Learning"])
    add_mentor("m2", "mentor-2", full_name="Low Rated", rating=3.0)

    r = client.get("/api/mentors", headers=headers)
    assert [m["id"] for m in r.json()] == ["m1"]
    assert r.json()[0]["full_name"] == "Ada Park"

    r = client.get("/api/mentors", params={"q": "machine"}, headers=headers)
    assert [m["id"] for m in r.json()] == ["m1"]

    r = client.post("/api/mentorships", json={"mentor_id": "mentor-1", "focus_area": "   "}, headers=headers)
    assert r.status_code == 422

    r = client.post("/api/mentorships", json={"mentor_id": "mentor-1", "focus_area": "ML career"}, headers=headers)
    assert r.status_code == 201
    assert r.json()["status"] == "pending"
    assert r.json()["mentee_id"] == user_id

    # Pending requests are not active mentorships yet.
    r = client.get("/api/mentorships", headers=headers)
    assert r.json() == []


def test_mentorship_request_failure_is_surfaced(client, user_id, auth_headers) -> None:
    client.app.dependency_overrides[get_gateway] = lambda: _WriteFailingGateway()
    try:
        r = client.post(
            "/api/mentorships",
            json={"mentor_id": "mentor-1", "focus_area": "ML career"},
            headers=auth_headers(user_id),
        )
    finally:
        client.app.dependency_overrides.clear()
    assert r.status_code == 503


def test_dashboard_stats(client, user_id, auth_headers) -> None:
    headers = auth_headers(user_id)
    for cid in ["c1", "c2", "c3", "c4"]:
        add_course(cid)
    enroll(user_id, "c1", status="in_progress", progress=40)
    enroll(user_id, "c2", status="completed", progress=100)
    enroll(user_id, "c3", status="in_progress", progress=10)
    for i in range(6):
        add_skill(f"s{i}")
        add_user_skill(user_id, f"s{i}", level=(i % 5) + 1)
    add_career_path("p1")
    with SessionLocal() as db:
        db.add(UserCareerGoal(user_id=user_id, career_path_id="p1", status="active"))
        db.commit()

    r = client.get("/api/dashboard", headers=headers)
    assert r.status_code == 200
    body = r.json()
    assert body["stats"] == {
        "courses_in_progress": 2,
        "courses_completed": 1,
        "skills_tracked": 6,
        "career_goals": 1,
    }
    assert len(body["recent_courses"]) == 3
    assert all(rc["course"] is not None for rc in body["recent_courses"])
    assert len(body["top_skills"]) == 5
    levels = [s["proficiency_level"] for s in body["top_skills"]]
    assert levels == sorted(levels, reverse=True)
    assert len(body["recommended_courses"]) == 4


def test_health(client) -> None:
    assert client.get("/health/").json()["status"] == "ok"
    assert client.get("/health/db").json()["db"] == "ok"
