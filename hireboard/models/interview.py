from ..extensions import db
from .base import TimestampMixin, new_id

INTERVIEW_STATUSES = ("Scheduled", "Completed", "Cancelled")


class Interview(db.Model, TimestampMixin):
    __tablename__ = "interviews"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    date = db.Column(db.DateTime, nullable=False, index=True)
    candidate_id = db.Column(db.String(36), db.ForeignKey("candidates.id"), index=True)
    candidate_name = db.Column(db.String(200))  # snapshot taken at scheduling time
    interviewer_id = db.Column(db.String(36), db.ForeignKey("profiles.id", ondelete="SET NULL"))
    position = db.Column(db.String(200), nullable=False)
    status = db.Column(db.String(20), nullable=False, default="Scheduled")
    user_id = db.Column(db.String(36), db.ForeignKey("profiles.id", ondelete="SET NULL"), index=True)
    settings = db.Column(db.JSON)

    exam_links = db.relationship("InterviewExam", cascade="all, delete-orphan",
                                 back_populates="interview")

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date.isoformat() if self.date else None,
            "candidate_id": self.candidate_id,
            "candidate_name": self.candidate_name,
            "interviewer_id": self.interviewer_id,
            "position": self.position,
            "status": self.status,
            "user_id": self.user_id,
            "settings": self.settings or {},
        }

    def __repr__(self) -> str:
        return f"<Interview id={self.id} candidate_id={self.candidate_id}>"
