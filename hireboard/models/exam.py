from ..extensions import db
from .base import new_id


class Exam(db.Model):
    __tablename__ = "exam_bank"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    title = db.Column(db.String(200), nullable=False)
    difficulty = db.Column(db.String(20))  # easy/medium/hard
    category = db.Column(db.String(80))
    description = db.Column(db.Text)

    def to_dict(self):
        return {"id": self.id, "title": self.title, "difficulty": self.difficulty,
                "category": self.category, "description": self.description}


class InterviewExam(db.Model):
    __tablename__ = "interview_exams"

    interview_id = db.Column(db.String(36), db.ForeignKey("interviews.id", ondelete="CASCADE"), primary_key=True)
    exam_id = db.Column(db.String(36), db.ForeignKey("exam_bank.id", ondelete="CASCADE"), primary_key=True)

    interview = db.relationship("Interview", back_populates="exam_links")
    exam = db.relationship("Exam")
