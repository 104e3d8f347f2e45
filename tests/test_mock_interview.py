import pytest

from hireboard.services.chat import CANNED_REPLIES, HIGH_STRESS_NOTE, canned_reply, introduction
from hireboard.services.interview_settings import build_settings, merge_preparation


def test_introduction_mentions_candidate_position_and_stress():
    text = introduction("Ada", "Platform Engineer", {"interview_type": "case", "stress_level": "high"})
    assert text.startswith("Hello Ada, I'm your interviewer for the Platform Engineer position.")
    assert "business case" in text
    assert HIGH_STRESS_NOTE in text


def test_canned_replies_advance_per_exchange_and_wrap():
    replies = CANNED_REPLIES["behavioral"]
    settings = {"interview_type": "behavioral"}
    # history is intro + (user, assistant) pairs
    seen = [canned_reply(n, settings) for n in range(1, 2 * len(replies) + 2, 2)]
    assert seen == replies + [replies[0]]


def test_unknown_interview_type_uses_technical_prompts():
    assert canned_reply(1, {"interview_type": "panel"}) == CANNED_REPLIES["technical"][0]


def test_preparation_overrides_settings():
    settings = build_settings({"environment": "library", "interview_type": "behavioral"})
    merged = merge_preparation(settings, {"stress_level": "high"})
    assert merged["virtual_background"] == "library"
    assert merged["stress_level"] == "high"
    assert merged["language"] == "english"
    assert merged["interview_type"] == "behavioral"


@pytest.fixture
def seeker_interview(make_candidate, make_interview, login_as):
    user_id = login_as("job_seeker")
    cand_id = make_candidate(name="Ada", user_id=user_id)
    return make_interview(candidate_id=cand_id, candidate_name="Ada", user_id=user_id, position="SRE",
                          settings=build_settings({"interview_type": "informational"}))


def test_chat_flow(client, seeker_interview):
    resp = client.post(f'/interviews/{seeker_interview}/chat/start', json={"interviewer_style": "tough"})
    assert resp.status_code == 200, resp.get_json()
    data = resp.get_json()
    assert data["message"]["role"] == "assistant"
    assert "Hello Ada" in data["message"]["content"]
    assert data["avatar"].endswith("interviewer2")

    replies = []
    for text in ("Hi, I'm Ada", "I like the team", "Growth"):
        resp = client.post(f'/interviews/{seeker_interview}/chat/messages', json={"message": text})
        assert resp.status_code == 200
        assert resp.get_json()["user_message"]["content"] == text
        replies.append(resp.get_json()["reply"]["content"])
    assert replies == CANNED_REPLIES["informational"][:3]


def test_empty_message_rejected(client, seeker_interview):
    client.post(f'/interviews/{seeker_interview}/chat/start', json={})
    resp = client.post(f'/interviews/{seeker_interview}/chat/messages', json={"message": "   "})
    assert resp.status_code == 400


def test_message_before_start_rejected(client, seeker_interview):
    resp = client.post(f'/interviews/{seeker_interview}/chat/messages', json={"message": "hello"})
    assert resp.status_code == 409


def test_other_job_seeker_cannot_open_interview(client, make_interview, login_as):
    interview_id = make_interview(candidate_name="Someone", user_id=None)
    login_as("job_seeker")
    assert client.get(f'/interviews/{interview_id}').status_code == 403


def test_interview_detail_includes_exams(client, seeker_interview):
    resp = client.get(f'/interviews/{seeker_interview}')
    assert resp.status_code == 200
    assert resp.get_json()["exams"] == []


def test_reply_delay_follows_config(app, client, seeker_interview, monkeypatch):
    pauses = []
    monkeypatch.setattr("hireboard.blueprints.interviews.routes.time.sleep", pauses.append)
    client.post(f'/interviews/{seeker_interview}/chat/start', json={})

    client.post(f'/interviews/{seeker_interview}/chat/messages', json={"message": "hi"})
    assert pauses == []

    app.config['MOCK_CHAT_DELAY_SECONDS'] = 0.25
    client.post(f'/interviews/{seeker_interview}/chat/messages', json={"message": "again"})
    assert pauses == [0.25]
