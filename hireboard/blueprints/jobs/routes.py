from flask import jsonify, current_app
from flask_login import current_user
from sqlalchemy.exc import IntegrityError
from . import bp
from .forms import ApplicationForm
from ...extensions import db
from ...models.job import Job, JobApplication
from ...utils.decorators import roles_required
from ...utils.responses import error, form_errors

INACTIVE_MESSAGE = "This job is no longer accepting applications"


@bp.get("/jobs")
def list_jobs():
    jobs = Job.query.filter_by(is_active=True).order_by(Job.created_at.desc()).all()
    return jsonify({"jobs": [j.to_dict() for j in jobs]})


@bp.get("/jobs/<job_id>")
def job_detail(job_id):
    job = db.get_or_404(Job, job_id)
    return jsonify({"job": job.to_dict()})


@bp.get("/apply/<job_id>")
def apply_page(job_id):
    job = db.get_or_404(Job, job_id)
    if not job.is_active:
        return error(INACTIVE_MESSAGE, 409)
    return jsonify({"job": {"id": job.id, "title": job.title, "company": job.company,
                            "is_active": job.is_active}})


@bp.post("/apply/<job_id>")
@roles_required("job_seeker")
def apply(job_id):
    job = db.get_or_404(Job, job_id)
    if not job.is_active:
        return error(INACTIVE_MESSAGE, 409)
    form = ApplicationForm()
    if not form.validate_on_submit():
        return form_errors(form)

    profile = current_user.profile
    application = JobApplication(
        user_id=profile.id,
        job_id=job.id,
        cover_letter=form.cover_letter.data or None,
        resume_url=form.resume_url.data or profile.resume_url,
    )
    db.session.add(application)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return error("You have already applied to this job", 409)
    current_app.logger.info('User %s applied to job %s', profile.id, job.id)
    return jsonify({"message": "Application submitted successfully",
                    "application": application.to_dict()}), 201
