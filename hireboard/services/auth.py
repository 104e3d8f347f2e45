"""Sign-up / sign-in / sign-out with the hr/admin approval gate.

hr and admin accounts start unapproved and cannot sign in until an admin
flips ``Profile.approved``; job seekers and interviewers are active at once.
The gate is re-checked on every sign-in.
"""
from flask import current_app
from flask_login import login_user, logout_user
from sqlalchemy.exc import SQLAlchemyError

from ..extensions import db, rq
from ..models.profile import Profile, Role, AUTO_APPROVED_ROLES, APPROVAL_GATED_ROLES
from ..models.user import AuthUser

APPROVAL_REQUIRED_MESSAGE = "Your account requires admin approval before you can log in"
ACCOUNT_STATUS_MESSAGE = "Could not verify account status"
INVALID_CREDENTIALS_MESSAGE = "Invalid login credentials"


class AuthError(Exception):
    status_code = 401

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ApprovalRequiredError(AuthError):
    status_code = 403

    def __init__(self, message=APPROVAL_REQUIRED_MESSAGE):
        super().__init__(message)


def display_name_for(first_name, last_name, display_name=None):
    return display_name or f"{first_name or ''} {last_name or ''}".strip()


def create_account(email, password, first_name=None, last_name=None, role=Role.JOB_SEEKER.value,
                   approved=None, display_name=None, email_confirmed=False):
    """Create the auth identity and its profile row in one commit."""
    if role not in Role.values():
        raise AuthError("Invalid role", 400)
    email = (email or "").strip()
    if AuthUser.query.filter(db.func.lower(AuthUser.email) == email.lower()).first():
        raise AuthError("User already registered", 409)
    if approved is None:
        approved = role in AUTO_APPROVED_ROLES

    user = AuthUser(
        email=email,
        email_confirmed=email_confirmed,
        user_metadata={
            "first_name": first_name,
            "last_name": last_name,
            "role": role,
            "display_name": display_name_for(first_name, last_name, display_name),
        },
    )
    user.set_password(password)
    user.profile = Profile(
        first_name=first_name or None,
        last_name=last_name or None,
        role=role,
        approved=bool(approved),
    )
    db.session.add(user)
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Account creation failed for %s', email)
        raise
    return user


def sign_up(email, password, first_name=None, last_name=None, role=Role.JOB_SEEKER.value,
            display_name=None):
    """Register a new account; returns ``(user, message)``.

    Interviewer accounts also get an ``interviewers`` row. A failing sync
    keeps the account and only changes the returned message.
    """
    user = create_account(email, password, first_name, last_name, role,
                          display_name=display_name)

    if role == Role.INTERVIEWER.value:
        from ..jobs.interviewers import sync_interviewers_job
        try:
            rq.enqueue(sync_interviewers_job)
        except Exception:
            current_app.logger.exception('Interviewer sync failed after signup of %s', user.id)
            return user, "Account created but interviewer profile setup failed. Please contact support."

    if role in APPROVAL_GATED_ROLES:
        return user, "Account created successfully. An admin must approve your account before you can log in."
    return user, "Account created successfully. Please check your email for verification."


def sign_in(email, password, remember=False):
    user = AuthUser.query.filter(db.func.lower(AuthUser.email) == (email or "").strip().lower()).first()
    if user is None or not user.check_password(password):
        raise AuthError(INVALID_CREDENTIALS_MESSAGE)

    login_user(user, remember=remember)

    profile = user.profile
    if profile is None:
        logout_user()
        raise AuthError(ACCOUNT_STATUS_MESSAGE, 403)
    if profile.role in APPROVAL_GATED_ROLES and not profile.approved:
        logout_user()
        raise ApprovalRequiredError()
    return user


def sign_out():
    logout_user()
