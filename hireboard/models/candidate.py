from ..extensions import db
from .base import TimestampMixin, new_id

class Candidate(db.Model, TimestampMixin):
    """Legacy recruiting record that predates user accounts.

    ``user_id`` stays null until the candidate is linked to a profile.
    """
    __tablename__ = "candidates"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    name = db.Column(db.String(200))
    email = db.Column(db.String(254), index=True)
    user_id = db.Column(db.String(36), db.ForeignKey("profiles.id", ondelete="SET NULL"), index=True)
    status = db.Column(db.String(30))

    def to_dict(self):
        return {"id": self.id, "name": self.name, "email": self.email,
                "user_id": self.user_id, "status": self.status}

    def __repr__(self) -> str:
        return f"<Candidate id={self.id} name={self.name!r}>"
