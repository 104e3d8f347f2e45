from flask_wtf import FlaskForm
from wtforms import StringField, PasswordField, SelectField, BooleanField
from wtforms.validators import DataRequired, Email, Length, Optional

from ...models.profile import Role

ROLE_CHOICES = [
    (Role.JOB_SEEKER.value, "Job Seeker"),
    (Role.INTERVIEWER.value, "Interviewer"),
    (Role.HR.value, "HR Professional"),
    (Role.ADMIN.value, "Administrator"),
]


class SignupForm(FlaskForm):
    email = StringField("Email", validators=[DataRequired(), Email(message="Invalid email address")])
    password = PasswordField("Password", validators=[DataRequired(), Length(min=6, message="Password must be at least 6 characters")])
    first_name = StringField("First name", validators=[DataRequired(message="First name is required")])
    last_name = StringField("Last name", validators=[DataRequired(message="Last name is required")])
    role = SelectField("Role", choices=ROLE_CHOICES, default=Role.JOB_SEEKER.value)


class LoginForm(FlaskForm):
    email = StringField("Email", validators=[DataRequired(), Email()])
    password = PasswordField("Password", validators=[DataRequired()])
    remember = BooleanField("Remember me", validators=[Optional()])
