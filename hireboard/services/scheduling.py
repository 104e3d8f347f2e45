"""Interview scheduling, editing, deletion and exam assignment for HR/admin."""
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from ..extensions import db
from ..models.candidate import Candidate
from ..models.exam import Exam, InterviewExam
from ..models.interview import Interview
from ..models.profile import Profile, Role, STAFF_ROLES
from .interview_settings import build_settings


def candidate_display_name(candidate, profile=None):
    """Name snapshot for a new interview: name, then profile name, then email."""
    name = (candidate.name or "").strip()
    if not name and profile is not None:
        name = profile.full_name
    if not name:
        name = candidate.email or "Unknown"
    return name


def sync_candidates_with_profiles(users):
    """Create a Candidate row for every job seeker that has none.

    ``users`` is the output of ``get-users-with-display-names``. Errors are
    logged; the listing that triggered the sync carries on without it.
    """
    created = 0
    try:
        linked = {c.user_id for c in Candidate.query.filter(Candidate.user_id.isnot(None)).all()}
        for u in users:
            if u.get("role") != Role.JOB_SEEKER.value or u["id"] in linked:
                continue
            db.session.add(Candidate(name=u.get("display_name"), email=u.get("email"),
                                     user_id=u["id"], status="Active"))
            created += 1
        if created:
            db.session.commit()
            current_app.logger.info('Created %d candidate records for job seekers', created)
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Error synchronizing candidates with profiles')
        return 0
    return created


def interviewer_options():
    profiles = (Profile.query
                .filter(Profile.role.in_(STAFF_ROLES + (Role.INTERVIEWER.value,)))
                .filter(Profile.approved.is_(True))
                .all())
    return [{"id": p.id, "name": p.full_name or "Unnamed Interviewer",
             "email": p.user.email if p.user else ""} for p in profiles]


def candidate_options():
    rows = db.session.query(Candidate, Profile).outerjoin(Profile, Profile.id == Candidate.user_id).all()
    out = []
    for c, p in rows:
        data = c.to_dict()
        data["name"] = (p.full_name if p is not None else "") or c.name or c.email
        out.append(data)
    return out


def list_interviews():
    interviews = Interview.query.order_by(Interview.date.desc()).all()
    names = {p.id: p.full_name or "Unnamed Interviewer" for p in
             Profile.query.filter(Profile.id.in_({i.interviewer_id for i in interviews if i.interviewer_id})).all()}
    candidates = {c.id: c for c in
                  Candidate.query.filter(Candidate.id.in_({i.candidate_id for i in interviews if i.candidate_id})).all()}
    out = []
    for i in interviews:
        data = i.to_dict()
        cand = candidates.get(i.candidate_id)
        data["candidate_name"] = (cand.name if cand else None) or i.candidate_name or "Unknown"
        data["user_id"] = i.user_id or (cand.user_id if cand else None)
        data["interviewer_name"] = names.get(i.interviewer_id)
        out.append(data)
    return out


def _check_interviewer(interviewer_id):
    if not interviewer_id or interviewer_id == "none":
        return None
    profile = db.session.get(Profile, interviewer_id)
    if profile is None:
        raise LookupError("Selected interviewer not found")
    return profile.id


def schedule_interview(candidate_id, position, date, interviewer_id=None, settings=None):
    candidate = db.session.get(Candidate, candidate_id)
    if candidate is None:
        raise LookupError("Selected candidate not found")
    profile = db.session.get(Profile, candidate.user_id) if candidate.user_id else None

    interview = Interview(
        candidate_id=candidate.id,
        candidate_name=candidate_display_name(candidate, profile),
        interviewer_id=_check_interviewer(interviewer_id),
        position=position,
        date=date,
        status="Scheduled",
        settings=build_settings(settings),
        user_id=candidate.user_id,
    )
    db.session.add(interview)
    db.session.commit()
    return interview


def update_interview(interview, date, candidate_id, interviewer_id, position, status, settings):
    """Apply an edit; ``settings`` holds only the changed keys and is laid over the stored ones."""
    if candidate_id and candidate_id != interview.candidate_id:
        candidate = db.session.get(Candidate, candidate_id)
        if candidate is None:
            raise LookupError("Selected candidate not found")
        profile = db.session.get(Profile, candidate.user_id) if candidate.user_id else None
        # name snapshot and owner follow the new candidate
        interview.candidate_id = candidate.id
        interview.candidate_name = candidate_display_name(candidate, profile)
        interview.user_id = candidate.user_id
    interview.date = date
    interview.interviewer_id = _check_interviewer(interviewer_id)
    interview.position = position
    interview.status = status
    interview.settings = build_settings({**(interview.settings or {}), **(settings or {})})
    db.session.commit()
    return interview


def delete_interview(interview):
    # exam links go first, then the interview row
    interview.exam_links.clear()
    db.session.flush()
    db.session.delete(interview)
    db.session.commit()


def assigned_exams(interview_id):
    return (Exam.query.join(InterviewExam, InterviewExam.exam_id == Exam.id)
            .filter(InterviewExam.interview_id == interview_id)
            .order_by(Exam.title.asc())
            .all())


def assign_exams(interview, exam_ids):
    """Replace the interview's exam assignments with ``exam_ids``."""
    interview.exam_links.clear()
    db.session.flush()
    for exam_id in dict.fromkeys(exam_ids):
        interview.exam_links.append(InterviewExam(exam_id=exam_id))
    db.session.commit()
    return assigned_exams(interview.id)
