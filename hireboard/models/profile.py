import enum

from ..extensions import db
from .base import TimestampMixin


class Role(str, enum.Enum):
    ADMIN = "admin"
    HR = "hr"
    JOB_SEEKER = "job_seeker"
    INTERVIEWER = "interviewer"

    @classmethod
    def values(cls):
        return [r.value for r in cls]


# roles whose new accounts are active immediately; the rest wait for an admin
AUTO_APPROVED_ROLES = (Role.JOB_SEEKER.value, Role.INTERVIEWER.value)
APPROVAL_GATED_ROLES = (Role.HR.value, Role.ADMIN.value)
STAFF_ROLES = (Role.ADMIN.value, Role.HR.value)


class Profile(db.Model, TimestampMixin):
    __tablename__ = "profiles"

    id = db.Column(db.String(36), db.ForeignKey("auth_users.id", ondelete="CASCADE"), primary_key=True)
    first_name = db.Column(db.String(120))
    last_name = db.Column(db.String(120))
    bio = db.Column(db.Text)
    avatar_url = db.Column(db.String(512))
    resume_url = db.Column(db.String(512))
    role = db.Column(db.String(20), nullable=False, default=Role.JOB_SEEKER.value, index=True)
    approved = db.Column(db.Boolean, nullable=False, default=True)

    user = db.relationship("AuthUser", back_populates="profile")

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    def has_role(self, *roles) -> bool:
        return self.role in {getattr(r, "value", r) for r in roles}

    def to_dict(self):
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "bio": self.bio,
            "avatar_url": self.avatar_url,
            "resume_url": self.resume_url,
            "role": self.role,
            "approved": self.approved,
        }

    def __repr__(self) -> str:
        return f"<Profile id={self.id} role={self.role}>"


class Interviewer(db.Model):
    __tablename__ = "interviewers"

    id = db.Column(db.String(36), db.ForeignKey("profiles.id", ondelete="CASCADE"), primary_key=True)
    bio = db.Column(db.Text)
    created_at = db.Column(db.DateTime, server_default=db.func.now())
