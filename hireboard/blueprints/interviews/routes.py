import time

from flask import jsonify, current_app, session, abort
from flask_login import login_required, current_user
from . import bp
from .forms import ChatMessageForm, PreparationForm
from ...extensions import db
from ...models.interview import Interview
from ...services import chat
from ...services.interview_settings import merge_preparation
from ...services.scheduling import assigned_exams
from ...utils.decorators import has_permission
from ...utils.responses import error, form_errors

CHAT_SESSION_KEY = "mock_chats"
PREPARATION_FIELDS = ("language", "interviewer_style", "stress_level", "virtual_background")


def _load_interview(interview_id):
    """Interview visible to staff, interviewers, or the job seeker it belongs to."""
    interview = db.get_or_404(Interview, interview_id)
    if has_permission(("admin", "hr", "interviewer")):
        return interview
    if interview.user_id and interview.user_id == current_user.id:
        return interview
    abort(403)


@bp.get("/interviews/<interview_id>")
@login_required
def detail(interview_id):
    interview = _load_interview(interview_id)
    return jsonify({
        "interview": interview.to_dict(),
        "exams": [e.to_dict() for e in assigned_exams(interview.id)],
    })


@bp.post("/interviews/<interview_id>/chat/start")
@login_required
def start_chat(interview_id):
    interview = _load_interview(interview_id)
    form = PreparationForm()
    if not form.validate_on_submit():
        return form_errors(form)

    # fields left out keep the interview's stored settings
    chosen = {f.name: f.data for f in form if f.name in PREPARATION_FIELDS and f.raw_data}
    settings = merge_preparation(interview.settings, chosen)
    intro = chat.chat_message("assistant", chat.introduction(interview.candidate_name, interview.position, settings))

    chats = dict(session.get(CHAT_SESSION_KEY) or {})
    chats[interview.id] = {"settings": settings, "count": 1}
    session[CHAT_SESSION_KEY] = chats
    return jsonify({"message": intro, "settings": settings, "avatar": chat.interviewer_avatar(settings)})


@bp.post("/interviews/<interview_id>/chat/messages")
@login_required
def send_message(interview_id):
    interview = _load_interview(interview_id)
    chats = dict(session.get(CHAT_SESSION_KEY) or {})
    state = chats.get(interview.id)
    if state is None:
        return error("Interview chat has not been started", 409)

    form = ChatMessageForm()
    if not form.validate_on_submit() or not form.message.data.strip():
        return form_errors(form) if form.errors else error("Message must not be empty", 400)

    user_message = chat.chat_message("user", form.message.data.strip())
    delay = current_app.config.get("MOCK_CHAT_DELAY_SECONDS", 0)
    if delay:
        time.sleep(delay)
    reply = chat.chat_message("assistant", chat.canned_reply(state["count"], state["settings"]))

    chats[interview.id] = {"settings": state["settings"], "count": state["count"] + 2}
    session[CHAT_SESSION_KEY] = chats
    return jsonify({"user_message": user_message, "reply": reply})
