import os
import sys
from datetime import datetime

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from hireboard import create_app
from hireboard.extensions import db
from hireboard.models import Candidate, Exam, Interview, Job
from hireboard.services.auth import create_account

PASSWORD = "secret123"


@pytest.fixture
def app(tmp_path):
    """Fresh app and in-memory database per test."""
    app = create_app('config.TestConfig')
    app.config['LOCAL_STORAGE_DIR'] = str(tmp_path / 'storage')
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


# Factories push their own app context and return ids, so tests can mix them
# freely with test client requests.

@pytest.fixture
def make_user(app):
    def _make(email, role="job_seeker", approved=None, first_name="Test", last_name="User"):
        with app.app_context():
            return create_account(email, PASSWORD, first_name, last_name, role, approved=approved).id
    return _make


@pytest.fixture
def make_candidate(app):
    def _make(name=None, email=None, user_id=None, status="Active"):
        with app.app_context():
            c = Candidate(name=name, email=email, user_id=user_id, status=status)
            db.session.add(c)
            db.session.commit()
            return c.id
    return _make


@pytest.fixture
def make_interview(app):
    def _make(candidate_id=None, candidate_name=None, user_id=None, date=None, position="Engineer", settings=None):
        with app.app_context():
            i = Interview(candidate_id=candidate_id, candidate_name=candidate_name, user_id=user_id,
                          date=date or datetime(2026, 1, 1, 10, 0), position=position, settings=settings)
            db.session.add(i)
            db.session.commit()
            return i.id
    return _make


@pytest.fixture
def make_exam(app):
    def _make(title, difficulty="medium", category="general"):
        with app.app_context():
            e = Exam(title=title, difficulty=difficulty, category=category)
            db.session.add(e)
            db.session.commit()
            return e.id
    return _make


@pytest.fixture
def make_job(app):
    def _make(title="Backend Engineer", company="Acme", is_active=True, created_at=None):
        with app.app_context():
            j = Job(title=title, company=company, location="Remote", is_active=is_active)
            if created_at is not None:
                j.created_at = created_at
            db.session.add(j)
            db.session.commit()
            return j.id
    return _make


def login(client, email, password=PASSWORD):
    return client.post('/auth/login', json={'email': email, 'password': password})


@pytest.fixture
def login_as(client, make_user):
    """Create an approved user of ``role`` and sign the test client in as them."""
    def _login(role, email=None):
        email = email or f"{role}@example.com"
        user_id = make_user(email, role=role, approved=True)
        resp = login(client, email)
        assert resp.status_code == 200, resp.get_json()
        return user_id
    return _login
