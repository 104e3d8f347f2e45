"""Find the interviews that belong to a signed-in job seeker.

Interviews created before user accounts existed only point at a legacy
``Candidate`` row, so a direct ``Interview.user_id`` lookup is not always
enough. Strategies run in strict precedence and the first one that yields
interviews wins:

1. interviews whose ``user_id`` is the user
2. interviews of the candidate whose ``user_id`` is the user
3. interviews of the candidate whose ``email`` is the user's email
4. recent interviews whose ``candidate_name`` contains the email or its
   local part

Every lookup failure is logged and treated as "no match" so the cascade
falls through instead of raising. Missing links discovered along the way are
returned as backfills; ``apply_backfills`` writes them one by one. Writing
the same ``user_id`` twice is harmless, so concurrent runs may race freely.
"""
from collections import namedtuple
from typing import Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from ..extensions import db
from ..models.candidate import Candidate
from ..models.interview import Interview

Backfill = namedtuple("Backfill", ["table", "row_id", "user_id"])
LinkResult = namedtuple("LinkResult", ["interviews", "backfills", "strategy"])

DIRECT = "direct"
CANDIDATE_USER = "candidate_user"
CANDIDATE_EMAIL = "candidate_email"
NAME_MATCH = "name_match"


class SqlLinkStore:
    """Reads and link writes against the interviews/candidates tables."""

    def __init__(self, session=None):
        self.session = session or db.session

    def _run(self, fn):
        try:
            return fn()
        except SQLAlchemyError:
            self.session.rollback()
            raise

    def interviews_for_user(self, user_id):
        return self._run(lambda: Interview.query.filter_by(user_id=user_id)
                         .order_by(Interview.date.asc()).all())

    def candidate_for_user(self, user_id):
        return self._run(lambda: Candidate.query.filter_by(user_id=user_id)
                         .order_by(Candidate.created_at.asc()).first())

    def candidate_for_email(self, email):
        return self._run(lambda: Candidate.query.filter_by(email=email)
                         .order_by(Candidate.created_at.asc()).first())

    def interviews_for_candidate(self, candidate_id):
        return self._run(lambda: Interview.query.filter_by(candidate_id=candidate_id)
                         .order_by(Interview.date.asc()).all())

    def recent_interviews(self, limit):
        return self._run(lambda: Interview.query.order_by(Interview.date.desc()).limit(limit).all())

    def _set_user(self, model, row_id, user_id):
        def write():
            model.query.filter_by(id=row_id).update({"user_id": user_id})
            self.session.commit()
        self._run(write)

    def link_interview(self, interview_id, user_id):
        self._set_user(Interview, interview_id, user_id)

    def link_candidate(self, candidate_id, user_id):
        self._set_user(Candidate, candidate_id, user_id)


def _attempt(step, fn, *args):
    try:
        return fn(*args)
    except Exception:
        current_app.logger.exception("Interview link lookup failed at step %s", step)
        return None


def _interview_backfills(interviews, user_id):
    return [Backfill("interviews", i.id, user_id) for i in interviews if not i.user_id]


def _by_date(interviews):
    return sorted(interviews, key=lambda i: (i.date is None, i.date))


def name_matches(candidate_name: Optional[str], email: str) -> bool:
    if not candidate_name or not email:
        return False
    name = candidate_name.lower()
    needles = {email.split("@", 1)[0].lower(), email.lower()}
    return any(n and n in name for n in needles)


def plan_links(user_id: str, email: Optional[str], store, fallback_limit: int = 100,
               fuzzy: bool = True) -> LinkResult:
    """Run the lookup cascade without writing anything."""
    log = current_app.logger
    backfills = []

    direct = _attempt(DIRECT, store.interviews_for_user, user_id)
    if direct:
        log.info("Found %d interviews for user %s by user_id", len(direct), user_id)
        return LinkResult(direct, backfills, DIRECT)

    candidate = _attempt(CANDIDATE_USER, store.candidate_for_user, user_id)
    if candidate is not None:
        found = _attempt(CANDIDATE_USER, store.interviews_for_candidate, candidate.id)
        if found:
            log.info("Found %d interviews for user %s via candidate %s", len(found), user_id, candidate.id)
            backfills.extend(_interview_backfills(found, user_id))
            return LinkResult(found, backfills, CANDIDATE_USER)

    if not email:
        return LinkResult([], backfills, None)

    candidate = _attempt(CANDIDATE_EMAIL, store.candidate_for_email, email)
    if candidate is not None:
        if not candidate.user_id:
            backfills.append(Backfill("candidates", candidate.id, user_id))
        found = _attempt(CANDIDATE_EMAIL, store.interviews_for_candidate, candidate.id)
        if found:
            log.info("Found %d interviews for user %s via email-matched candidate %s",
                     len(found), user_id, candidate.id)
            backfills.extend(_interview_backfills(found, user_id))
            return LinkResult(found, backfills, CANDIDATE_EMAIL)

    if not fuzzy:
        return LinkResult([], backfills, None)

    recent = _attempt(NAME_MATCH, store.recent_interviews, fallback_limit) or []
    matches = _by_date([i for i in recent if name_matches(i.candidate_name, email)])
    if matches:
        log.info("Found %d interviews for user %s by candidate name match", len(matches), user_id)
        backfills.extend(_interview_backfills(matches, user_id))
        return LinkResult(matches, backfills, NAME_MATCH)

    log.debug("No interviews found for user %s through any strategy", user_id)
    return LinkResult([], backfills, None)


def apply_backfills(backfills, store) -> int:
    """Write each backfill independently; failures are logged and skipped."""
    applied = 0
    for b in backfills:
        try:
            if b.table == "candidates":
                store.link_candidate(b.row_id, b.user_id)
            else:
                store.link_interview(b.row_id, b.user_id)
            applied += 1
        except Exception:
            current_app.logger.exception("Backfill of %s %s failed", b.table, b.row_id)
    return applied


def find_interviews_for_user(user_id: str, email: Optional[str], store=None) -> list:
    store = store or SqlLinkStore()
    result = plan_links(
        user_id, email, store,
        fallback_limit=current_app.config.get("LINKER_FALLBACK_LIMIT", 100),
        fuzzy=current_app.config.get("LINKER_FUZZY_FALLBACK", True),
    )
    apply_backfills(result.backfills, store)
    return result.interviews
