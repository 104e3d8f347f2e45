from flask import jsonify, current_app
from flask_login import login_required, current_user
from . import bp
from .forms import ProfileForm, UploadForm
from ...extensions import db
from ...services.storage import UploadError, upload_avatar, upload_resume
from ...utils.responses import error, form_errors

EDITABLE_FIELDS = ("first_name", "last_name", "bio")


@bp.get("/profile")
@login_required
def show_profile():
    profile = current_user.profile
    data = profile.to_dict()
    data["email"] = current_user.email
    return jsonify({"profile": data})


@bp.post("/profile")
@login_required
def update_profile():
    form = ProfileForm()
    if not form.validate_on_submit():
        return form_errors(form)
    profile = current_user.profile
    for name in EDITABLE_FIELDS:
        field = getattr(form, name)
        if field.raw_data:
            setattr(profile, name, field.data or None)
    db.session.commit()
    return jsonify({"message": "Profile updated successfully", "profile": profile.to_dict()})


def _upload(kind, uploader):
    form = UploadForm()
    if not form.validate_on_submit():
        return form_errors(form)
    profile = current_user.profile
    try:
        url = uploader(profile.id, form.file.data)
    except UploadError as e:
        return error(str(e), 400)
    except Exception:
        current_app.logger.exception('Error uploading %s for %s', kind, profile.id)
        return error(f"Error uploading {kind}", 502)
    setattr(profile, f"{kind}_url", url)
    db.session.commit()
    return jsonify({"message": f"{kind.capitalize()} uploaded successfully", "url": url,
                    "profile": profile.to_dict()})


@bp.post("/profile/avatar")
@login_required
def avatar():
    return _upload("avatar", upload_avatar)


@bp.post("/profile/resume")
@login_required
def resume():
    return _upload("resume", upload_resume)
