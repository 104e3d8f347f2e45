"""Privileged backend functions, invoked by name.

Each function takes a JSON-like payload dict and returns a JSON-serialisable
result. Failures raise ``FunctionError`` carrying the HTTP status the caller
should surface.
"""
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from ..extensions import db
from ..models.profile import Profile, Interviewer, Role
from ..models.user import AuthUser
from .auth import AuthError, create_account, display_name_for

UNKNOWN_EMAIL = "unknown@example.com"

_registry = {}


class FunctionError(Exception):
    def __init__(self, message, status_code=400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def backend_function(name):
    def register(fn):
        _registry[name] = fn
        return fn
    return register


def invoke(name, payload=None):
    fn = _registry.get(name)
    if fn is None:
        raise FunctionError(f"Unknown function: {name}", 404)
    current_app.logger.info('Invoking backend function %s', name)
    return fn(payload or {})


@backend_function("get-users-with-display-names")
def get_users_with_display_names(payload):
    rows = db.session.query(Profile, AuthUser).outerjoin(AuthUser, AuthUser.id == Profile.id).all()
    out = []
    for profile, user in rows:
        fallback = profile.full_name or "Unknown User"
        data = profile.to_dict()
        if user is None:
            current_app.logger.error('No auth user for profile %s', profile.id)
            data.update(email=UNKNOWN_EMAIL, display_name=fallback)
        else:
            meta = user.user_metadata or {}
            name = meta.get("display_name") or meta.get("name") or meta.get("full_name")
            data.update(email=user.email or UNKNOWN_EMAIL, display_name=name or fallback)
        out.append(data)
    return out


@backend_function("admin-create-user")
def admin_create_user(payload):
    role = payload.get("role")
    if role not in Role.values():
        raise FunctionError("Invalid role", 400)
    first_name = payload.get("firstName")
    last_name = payload.get("lastName")
    try:
        user = create_account(
            payload.get("email"),
            payload.get("password"),
            first_name,
            last_name,
            role,
            approved=bool(payload.get("approved")),
            display_name=display_name_for(first_name, last_name, payload.get("displayName")),
            email_confirmed=True,
        )
    except AuthError as e:
        raise FunctionError(e.message, 400)
    except SQLAlchemyError as e:
        raise FunctionError(str(e), 500)
    return {"user": {"id": user.id, "email": user.email, "user_metadata": user.user_metadata}}


@backend_function("sync-interviewers")
def sync_interviewers(payload):
    """Ensure every approved interviewer profile has an ``interviewers`` row."""
    try:
        profiles = Profile.query.filter_by(role=Role.INTERVIEWER.value, approved=True).all()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception('Error fetching interviewer profiles')
        raise FunctionError(str(e), 500)

    current_app.logger.info('Found %d approved interviewer profiles for sync', len(profiles))
    created = 0
    for profile in profiles:
        if db.session.get(Interviewer, profile.id) is not None:
            continue
        db.session.add(Interviewer(id=profile.id, bio=profile.full_name or "New Interviewer"))
        try:
            db.session.commit()
            created += 1
        except SQLAlchemyError:
            db.session.rollback()
            current_app.logger.exception('Error inserting interviewer %s', profile.id)
    return {"success": True, "message": "Interviewer synchronization completed", "created": created}
