from flask_wtf import FlaskForm
from wtforms import SelectField, TextAreaField
from wtforms.validators import DataRequired, Length

from ...services.interview_settings import ENVIRONMENTS


class PreparationForm(FlaskForm):
    language = SelectField("Interview language", choices=[("english", "English"), ("chinese", "Chinese")],
                           default="english")
    interviewer_style = SelectField("Interviewer style",
                                    choices=[("friendly", "Friendly"), ("tough", "Tough"), ("technical", "Technical")],
                                    default="friendly")
    stress_level = SelectField("Stress level", choices=[("low", "Low"), ("normal", "Normal"), ("high", "High")],
                               default="normal")
    virtual_background = SelectField("Virtual background", choices=ENVIRONMENTS, default="office")


class ChatMessageForm(FlaskForm):
    message = TextAreaField("Message", validators=[DataRequired(message="Message must not be empty"), Length(max=4000)])
