from flask_wtf import FlaskForm
from wtforms import TextAreaField, StringField
from wtforms.validators import Optional, Length, URL


class ApplicationForm(FlaskForm):
    cover_letter = TextAreaField("Cover letter", validators=[Optional(), Length(max=5000)])
    resume_url = StringField("Resume URL", validators=[Optional(), URL(require_tld=False)])
