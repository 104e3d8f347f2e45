from flask import jsonify, current_app
from flask_login import current_user
from . import bp
from .forms import AddUserForm, EditUserForm
from ...extensions import db
from ...models.profile import Profile
from ...models.user import AuthUser
from ...services.functions import FunctionError, invoke
from ...utils.decorators import admin_required
from ...utils.responses import error, form_errors


@bp.get("/users")
@admin_required
def users_index():
    try:
        users = invoke("get-users-with-display-names")
    except FunctionError as e:
        current_app.logger.exception('Error fetching users')
        return error(e.message or "Failed to load users", e.status_code)
    return jsonify({"users": users})


@bp.post("/users")
@admin_required
def add_user():
    form = AddUserForm()
    if not form.validate_on_submit():
        return form_errors(form)
    try:
        result = invoke("admin-create-user", {
            "email": form.email.data,
            "password": form.password.data,
            "firstName": form.first_name.data,
            "lastName": form.last_name.data,
            "role": form.role.data,
            "approved": bool(form.approved.data),
            "displayName": f"{form.first_name.data or ''} {form.last_name.data or ''}".strip(),
        })
    except FunctionError as e:
        return error(e.message, e.status_code)
    return jsonify({"message": "User created successfully", **result}), 201


@bp.post("/users/<user_id>")
@admin_required
def edit_user(user_id):
    profile = db.get_or_404(Profile, user_id)
    form = EditUserForm(role=profile.role)
    if not form.validate_on_submit():
        return form_errors(form)
    # only fields present in the request are changed
    if form.first_name.raw_data:
        profile.first_name = form.first_name.data or None
    if form.last_name.raw_data:
        profile.last_name = form.last_name.data or None
    if form.role.raw_data:
        profile.role = form.role.data
    if form.approved.raw_data:
        profile.approved = bool(form.approved.data)
    db.session.commit()
    return jsonify({"message": "User updated successfully", "profile": profile.to_dict()})


@bp.post("/users/<user_id>/approve")
@admin_required
def toggle_approval(user_id):
    profile = db.get_or_404(Profile, user_id)
    profile.approved = not profile.approved
    db.session.commit()
    current_app.logger.info('Admin %s set approved=%s on %s', current_user.id, profile.approved, profile.id)
    return jsonify({"message": "User updated successfully", "profile": profile.to_dict()})


@bp.delete("/users/<user_id>")
@admin_required
def delete_user(user_id):
    if user_id == current_user.id:
        return error("You cannot delete your own account", 400)
    user = db.get_or_404(AuthUser, user_id)
    db.session.delete(user)
    db.session.commit()
    return jsonify({"message": "User deleted successfully"})


@bp.post("/interviewers/sync")
@admin_required
def sync_interviewers():
    try:
        result = invoke("sync-interviewers")
    except FunctionError as e:
        return error(e.message or "Failed to sync interviewers", e.status_code)
    return jsonify({"message": "Interviewers synchronized successfully", **result})
