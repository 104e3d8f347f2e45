from flask import jsonify, current_app
from flask_login import current_user
from sqlalchemy.exc import SQLAlchemyError
from . import bp
from ...extensions import db
from ...models.job import Job, JobApplication
from ...services.linker import find_interviews_for_user
from ...utils.decorators import roles_required
from ...utils.responses import error


@bp.get("/dashboard")
@roles_required("job_seeker")
def job_seeker_dashboard():
    """Recommended jobs, own applications and linked interviews.

    Requesting it again is the manual refresh; nothing is retried here.
    """
    limit = current_app.config.get("DASHBOARD_JOBS_LIMIT", 5)
    try:
        jobs = Job.query.filter_by(is_active=True).order_by(Job.created_at.desc()).limit(limit).all()
        applications = (JobApplication.query.filter_by(user_id=current_user.id)
                        .order_by(JobApplication.created_at.desc()).all())
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Error fetching dashboard data for %s', current_user.id)
        return error("Failed to load dashboard data", 500)

    current_app.logger.info('Fetching interviews for user %s with role %s', current_user.id, current_user.role)
    interviews = find_interviews_for_user(current_user.id, current_user.email)

    return jsonify({
        "jobs": [j.to_dict() for j in jobs],
        "applications": [a.to_dict() for a in applications],
        "interviews": [i.to_dict() for i in interviews],
    })
