from flask import jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from . import bp
from .forms import AssignExamsForm, InterviewEditForm, InterviewForm, QuickScheduleForm
from ...extensions import db
from ...models.exam import Exam
from ...models.interview import Interview
from ...services import scheduling
from ...services.functions import FunctionError, invoke
from ...services.interview_settings import wizard
from ...utils.decorators import roles_required
from ...utils.responses import error, form_errors

staff_only = roles_required("hr", "admin")


@bp.get("/hr/interviews")
@staff_only
def list_interviews():
    try:
        users = invoke("get-users-with-display-names")
    except FunctionError:
        current_app.logger.exception('Error fetching users for candidate sync')
        users = []
    scheduling.sync_candidates_with_profiles(users)

    try:
        interviews = scheduling.list_interviews()
        candidates = scheduling.candidate_options()
        interviewers = scheduling.interviewer_options()
        exams = Exam.query.order_by(Exam.title.asc()).all()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Error fetching interview data')
        return error("Failed to load interview data", 500)

    return jsonify({
        "interviews": interviews,
        "candidates": candidates,
        "interviewers": interviewers,
        "exams": [e.to_dict() for e in exams],
    })


@bp.get("/hr/interviews/new")
@staff_only
def new_interview():
    data = wizard()
    data["candidates"] = scheduling.candidate_options()
    data["interviewers"] = scheduling.interviewer_options()
    return jsonify(data)


def _schedule(form, settings):
    try:
        interview = scheduling.schedule_interview(
            form.candidate_id.data,
            form.position.data,
            form.date.data,
            interviewer_id=form.interviewer_id.data,
            settings=settings,
        )
    except LookupError as e:
        return error(str(e), 400)
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Error creating interview')
        return error("Failed to schedule interview", 500)
    return jsonify({"message": "Interview scheduled successfully", "interview": interview.to_dict()}), 201


@bp.post("/hr/interviews")
@staff_only
def create_interview():
    form = InterviewForm()
    if not form.validate_on_submit():
        return form_errors(form)
    return _schedule(form, form.settings_data())


@bp.post("/hr/interviews/quick")
@staff_only
def quick_schedule():
    form = QuickScheduleForm()
    if not form.validate_on_submit():
        return form_errors(form)
    return _schedule(form, None)


@bp.post("/hr/interviews/<interview_id>")
@staff_only
def edit_interview(interview_id):
    interview = db.get_or_404(Interview, interview_id)
    form = InterviewEditForm()
    if not form.validate_on_submit():
        return form_errors(form)
    try:
        scheduling.update_interview(
            interview,
            date=form.date.data,
            candidate_id=form.candidate_id.data,
            interviewer_id=form.interviewer_id.data,
            position=form.position.data,
            status=form.status.data,
            settings=form.sent_settings(),
        )
    except LookupError as e:
        db.session.rollback()
        return error(str(e), 400)
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Error updating interview %s', interview_id)
        return error("Failed to update interview", 500)
    return jsonify({"message": "Interview updated successfully", "interview": interview.to_dict()})


@bp.delete("/hr/interviews/<interview_id>")
@staff_only
def delete_interview(interview_id):
    interview = db.get_or_404(Interview, interview_id)
    try:
        scheduling.delete_interview(interview)
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Error deleting interview %s', interview_id)
        return error("Failed to delete interview", 500)
    return jsonify({"message": "Interview deleted successfully"})


@bp.get("/hr/interviews/<interview_id>/exams")
@staff_only
def interview_exams(interview_id):
    interview = db.get_or_404(Interview, interview_id)
    return jsonify({"exam_ids": [e.id for e in scheduling.assigned_exams(interview.id)]})


@bp.post("/hr/interviews/<interview_id>/exams")
@staff_only
def assign_exams(interview_id):
    interview = db.get_or_404(Interview, interview_id)
    form = AssignExamsForm()
    form.exam_ids.choices = [(e.id, e.title) for e in Exam.query.all()]
    if not form.validate_on_submit():
        return form_errors(form)
    try:
        exams = scheduling.assign_exams(interview, form.exam_ids.data or [])
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Error assigning exams to %s', interview_id)
        return error("Failed to assign exams", 500)
    return jsonify({"message": "Exams assigned successfully", "exams": [e.to_dict() for e in exams]})
