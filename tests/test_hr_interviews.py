from datetime import datetime

import pytest

from hireboard.extensions import db
from hireboard.models import Candidate, Interview, InterviewExam
from hireboard.services.interview_settings import DEFAULT_SETTINGS


@pytest.fixture
def hr(login_as):
    return login_as("hr")


def test_listing_creates_candidates_for_job_seekers(app, client, make_user, hr):
    seeker_id = make_user("seeker@example.com", first_name="Sam", last_name="Park")
    resp = client.get('/hr/interviews')
    assert resp.status_code == 200
    data = resp.get_json()
    assert any(c["user_id"] == seeker_id for c in data["candidates"])
    assert any(i["id"] == hr for i in data["interviewers"])

    # a second listing does not duplicate the candidate
    client.get('/hr/interviews')
    with app.app_context():
        assert Candidate.query.filter_by(user_id=seeker_id).count() == 1


def test_wizard_lists_steps_in_order(client, hr):
    resp = client.get('/hr/interviews/new')
    assert resp.status_code == 200
    steps = [s["key"] for s in resp.get_json()["steps"]]
    assert steps == ["basic", "tests", "settings", "environment"]


def test_create_interview_with_settings(app, client, make_user, make_candidate, hr):
    seeker_id = make_user("seeker@example.com")
    cand_id = make_candidate(name="Sam Park", email="seeker@example.com", user_id=seeker_id)
    resp = client.post('/hr/interviews', json={
        "candidate_id": cand_id,
        "position": "Data Engineer",
        "date": "2026-11-02T09:30",
        "interviewer_id": hr,
        "ai_technical_test": True,
        "interview_type": "behavioral",
        "environment": "cafe",
        "notes": "Bring laptop",
    })
    assert resp.status_code == 201, resp.get_json()
    interview = resp.get_json()["interview"]
    assert interview["status"] == "Scheduled"
    assert interview["candidate_name"] == "Sam Park"
    assert interview["user_id"] == seeker_id
    assert interview["settings"]["ai_technical_test"] is True
    assert interview["settings"]["interview_type"] == "behavioral"
    assert interview["settings"]["lighting"] == "day"
    assert interview["date"] == "2026-11-02T09:30:00"


def test_quick_schedule_uses_default_settings(client, make_candidate, hr):
    cand_id = make_candidate(name="", email="legacy@example.com")
    resp = client.post('/hr/interviews/quick', json={
        "candidate_id": cand_id, "position": "QA", "date": "2026-11-03T14:00", "interviewer_id": "none",
    })
    assert resp.status_code == 201, resp.get_json()
    interview = resp.get_json()["interview"]
    assert interview["settings"] == DEFAULT_SETTINGS
    assert interview["interviewer_id"] is None
    assert interview["candidate_name"] == "legacy@example.com"


def test_schedule_requires_fields_and_known_candidate(client, hr):
    resp = client.post('/hr/interviews/quick', json={"position": "QA"})
    assert resp.status_code == 400
    assert {"candidate_id", "date"} <= set(resp.get_json()["errors"])

    resp = client.post('/hr/interviews/quick', json={"candidate_id": "missing", "position": "QA",
                                                     "date": "2026-11-03T14:00"})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Selected candidate not found"


def test_edit_interview(client, make_candidate, make_interview, hr):
    interview_id = make_interview(candidate_id=make_candidate(name="Sam"), candidate_name="Sam")
    resp = client.post(f'/hr/interviews/{interview_id}', json={
        "position": "Lead Engineer", "date": "2026-12-01T08:00:00", "status": "Completed",
        "interview_mode": "audio",
    })
    assert resp.status_code == 200, resp.get_json()
    interview = resp.get_json()["interview"]
    assert interview["position"] == "Lead Engineer"
    assert interview["status"] == "Completed"
    assert interview["settings"]["interview_mode"] == "audio"


def test_edit_rejects_unknown_status(client, make_interview, hr):
    interview_id = make_interview()
    resp = client.post(f'/hr/interviews/{interview_id}', json={
        "position": "X", "date": "2026-12-01T08:00", "status": "Lost"})
    assert resp.status_code == 400


def test_assign_exams_replaces_previous_set(app, client, make_interview, make_exam, hr):
    interview_id = make_interview()
    a, b, c = make_exam("Algorithms"), make_exam("Behaviour"), make_exam("Cloud")

    resp = client.post(f'/hr/interviews/{interview_id}/exams', json={"exam_ids": [a, b]})
    assert resp.status_code == 200, resp.get_json()
    resp = client.post(f'/hr/interviews/{interview_id}/exams', json={"exam_ids": [c]})
    assert [e["id"] for e in resp.get_json()["exams"]] == [c]

    assert client.get(f'/hr/interviews/{interview_id}/exams').get_json()["exam_ids"] == [c]


def test_assign_unknown_exam_rejected(client, make_interview, hr):
    interview_id = make_interview()
    resp = client.post(f'/hr/interviews/{interview_id}/exams', json={"exam_ids": ["nope"]})
    assert resp.status_code == 400


def test_delete_interview_removes_exam_links(app, client, make_interview, make_exam, hr):
    interview_id = make_interview()
    exam_id = make_exam("Algorithms")
    client.post(f'/hr/interviews/{interview_id}/exams', json={"exam_ids": [exam_id]})

    resp = client.delete(f'/hr/interviews/{interview_id}')
    assert resp.status_code == 200
    with app.app_context():
        assert db.session.get(Interview, interview_id) is None
        assert InterviewExam.query.count() == 0
    assert client.delete(f'/hr/interviews/{interview_id}').status_code == 404


def test_list_newest_first(client, make_interview, hr):
    make_interview(candidate_name="Old", date=datetime(2026, 1, 1))
    make_interview(candidate_name="New", date=datetime(2026, 6, 1))
    names = [i["candidate_name"] for i in client.get('/hr/interviews').get_json()["interviews"]]
    assert names == ["New", "Old"]


def test_status_only_edit_keeps_settings(client, make_candidate, make_interview, hr):
    stored = {"interview_type": "behavioral", "notes": "bring laptop", "interview_mode": "audio"}
    interview_id = make_interview(candidate_id=make_candidate(name="Sam"), candidate_name="Sam", settings=stored)
    resp = client.post(f'/hr/interviews/{interview_id}', json={
        "position": "Engineer", "date": "2026-12-01T08:00", "status": "Completed"})
    assert resp.status_code == 200, resp.get_json()
    settings = resp.get_json()["interview"]["settings"]
    assert settings["notes"] == "bring laptop"
    assert settings["interview_type"] == "behavioral"
    assert settings["interview_mode"] == "audio"

    resp = client.post(f'/hr/interviews/{interview_id}', json={
        "position": "Engineer", "date": "2026-12-01T08:00", "status": "Completed", "notes": "room 4"})
    settings = resp.get_json()["interview"]["settings"]
    assert settings["notes"] == "room 4"
    assert settings["interview_mode"] == "audio"


def test_changing_candidate_moves_name_and_owner(client, make_user, make_candidate, make_interview, hr):
    old_owner = make_user("old@example.com")
    new_owner = make_user("new@example.com", first_name="Nia", last_name="Cole")
    old_cand = make_candidate(name="Old Seeker", user_id=old_owner)
    new_cand = make_candidate(name="", email="new@example.com", user_id=new_owner)
    interview_id = make_interview(candidate_id=old_cand, candidate_name="Old Seeker", user_id=old_owner)

    resp = client.post(f'/hr/interviews/{interview_id}', json={
        "candidate_id": new_cand, "position": "Engineer", "date": "2026-12-01T08:00", "status": "Scheduled"})
    assert resp.status_code == 200, resp.get_json()
    interview = resp.get_json()["interview"]
    assert interview["candidate_id"] == new_cand
    assert interview["candidate_name"] == "Nia Cole"
    assert interview["user_id"] == new_owner
