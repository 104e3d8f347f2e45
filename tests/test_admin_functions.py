import pytest

from hireboard.extensions import db
from hireboard.models import AuthUser, Interviewer, Profile
from hireboard.services.functions import FunctionError, invoke


def test_display_names_fall_back_in_order(app, make_user):
    with_meta = make_user("meta@example.com", first_name="Ann", last_name="Bell")
    no_name = make_user("blank@example.com", first_name=None, last_name=None)
    with app.app_context():
        db.session.get(AuthUser, no_name).user_metadata = {}
        db.session.commit()
        users = {u["id"]: u for u in invoke("get-users-with-display-names")}
    assert users[with_meta]["display_name"] == "Ann Bell"
    assert users[with_meta]["email"] == "meta@example.com"
    assert users[no_name]["display_name"] == "Unknown User"


def test_admin_create_user_confirms_email(app):
    with app.app_context():
        result = invoke("admin-create-user", {"email": "new@example.com", "password": "secret123",
                                              "firstName": "Neo", "lastName": "Ray", "role": "hr",
                                              "approved": True})
        user = db.session.get(AuthUser, result["user"]["id"])
        assert user.email_confirmed is True
        assert user.profile.approved is True
        assert result["user"]["user_metadata"]["display_name"] == "Neo Ray"


def test_admin_create_user_rejects_bad_role(app):
    with app.app_context():
        with pytest.raises(FunctionError) as exc:
            invoke("admin-create-user", {"email": "x@example.com", "password": "secret123", "role": "boss"})
    assert exc.value.status_code == 400


def test_unknown_function(app):
    with app.app_context():
        with pytest.raises(FunctionError) as exc:
            invoke("does-not-exist")
    assert exc.value.status_code == 404


def test_sync_interviewers_only_approved_and_idempotent(app, make_user):
    approved = make_user("a@example.com", role="interviewer", approved=True)
    pending = make_user("p@example.com", role="interviewer", approved=False)
    with app.app_context():
        first = invoke("sync-interviewers")
        second = invoke("sync-interviewers")
        assert db.session.get(Interviewer, approved) is not None
        assert db.session.get(Interviewer, pending) is None
    assert first["success"] is True and first["created"] == 1
    assert second["created"] == 0


@pytest.fixture
def admin(login_as):
    return login_as("admin")


def test_admin_lists_users(client, admin):
    resp = client.get('/admin/users')
    assert resp.status_code == 200
    assert [u["id"] for u in resp.get_json()["users"]] == [admin]


def test_admin_adds_user(client, admin):
    resp = client.post('/admin/users', json={"email": "hire@example.com", "password": "secret123",
                                             "first_name": "Hal", "last_name": "Ino", "role": "interviewer",
                                             "approved": True})
    assert resp.status_code == 201, resp.get_json()
    resp = client.post('/admin/users', json={"email": "hire@example.com", "password": "secret123",
                                             "role": "interviewer"})
    assert resp.status_code == 400


def test_admin_approves_hr(app, client, make_user, admin):
    hr_id = make_user("hr@example.com", role="hr")
    resp = client.post(f'/admin/users/{hr_id}/approve')
    assert resp.status_code == 200
    assert resp.get_json()["profile"]["approved"] is True
    with app.app_context():
        assert db.session.get(Profile, hr_id).approved is True


def test_admin_edits_only_sent_fields(client, make_user, admin):
    user_id = make_user("seeker@example.com", first_name="Old", last_name="Name")
    resp = client.post(f'/admin/users/{user_id}', json={"role": "interviewer"})
    assert resp.status_code == 200
    profile = resp.get_json()["profile"]
    assert profile["role"] == "interviewer"
    assert profile["first_name"] == "Old"
    assert profile["approved"] is True


def test_admin_deletes_user_and_profile(app, client, make_user, admin):
    user_id = make_user("gone@example.com")
    assert client.delete(f'/admin/users/{user_id}').status_code == 200
    with app.app_context():
        assert db.session.get(AuthUser, user_id) is None
        assert db.session.get(Profile, user_id) is None
    assert client.delete(f'/admin/users/{admin}').status_code == 400


def test_admin_sync_endpoint(client, make_user, admin):
    make_user("i@example.com", role="interviewer")
    resp = client.post('/admin/interviewers/sync')
    assert resp.status_code == 200
    assert resp.get_json()["created"] == 1
