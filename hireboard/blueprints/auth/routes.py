from flask import jsonify
from flask_login import login_required, current_user
from flask_wtf.csrf import generate_csrf
from . import bp
from .forms import LoginForm, SignupForm
from ...services.auth import AuthError, sign_in, sign_out, sign_up
from ...utils.responses import error, form_errors


@bp.get("/csrf")
def csrf():
    return jsonify({"csrf_token": generate_csrf()})


@bp.post("/login")
def login():
    form = LoginForm()
    if not form.validate_on_submit():
        return form_errors(form)
    try:
        user = sign_in(form.email.data, form.password.data, remember=bool(form.remember.data))
    except AuthError as e:
        return error(e.message, e.status_code)
    return jsonify({"message": "Signed in successfully", "user": {"id": user.id, "email": user.email},
                    "profile": user.profile.to_dict()})


@bp.post("/signup")
def signup():
    form = SignupForm()
    if not form.validate_on_submit():
        return form_errors(form)
    try:
        user, message = sign_up(
            form.email.data,
            form.password.data,
            first_name=form.first_name.data,
            last_name=form.last_name.data,
            role=form.role.data,
        )
    except AuthError as e:
        return error(e.message, e.status_code)
    return jsonify({"message": message, "user": {"id": user.id, "email": user.email},
                    "profile": user.profile.to_dict()}), 201


@bp.post("/logout")
@login_required
def logout():
    sign_out()
    return jsonify({"message": "Signed out successfully"})


@bp.get("/me")
@login_required
def me():
    profile = current_user.profile
    return jsonify({
        "user": {"id": current_user.id, "email": current_user.email},
        "profile": profile.to_dict() if profile else None,
        "csrf_token": generate_csrf(),
    })
