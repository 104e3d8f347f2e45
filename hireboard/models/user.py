from ..extensions import db
from flask_login import UserMixin
from .base import TimestampMixin, new_id
from werkzeug.security import generate_password_hash, check_password_hash

class AuthUser(db.Model, UserMixin, TimestampMixin):
    """Identity record of the hosted auth service.

    Application data lives on ``Profile``, which shares this row's id.
    """
    __tablename__ = "auth_users"
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    email_confirmed = db.Column(db.Boolean, default=False, nullable=False)
    user_metadata = db.Column(db.JSON)  # {"first_name","last_name","display_name"}

    profile = db.relationship("Profile", uselist=False, back_populates="user",
                              cascade="all, delete-orphan")

    def set_password(self, raw):
        self.password_hash = generate_password_hash(raw)

    def check_password(self, raw):
        return check_password_hash(self.password_hash, raw)

    @property
    def role(self):
        return self.profile.role if self.profile else None

    def __repr__(self) -> str:
        return f"<AuthUser id={self.id} email={self.email!r}>"
