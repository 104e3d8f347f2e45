from flask_wtf import FlaskForm
from wtforms import StringField, DateTimeField, TextAreaField, SelectField, BooleanField, SelectMultipleField
from wtforms.validators import DataRequired, Optional, Length

from ...models.interview import INTERVIEW_STATUSES
from ...services.interview_settings import (
    DEFAULT_SETTINGS, INTERVIEW_MODES, EXPERIENCE_LEVELS, INTERVIEW_TYPES, ENVIRONMENTS, LIGHTING,
)

DATE_FORMATS = ['%Y-%m-%dT%H:%M:%S.%fZ', '%Y-%m-%dT%H:%M:%SZ', '%Y-%m-%dT%H:%M:%S', '%Y-%m-%dT%H:%M']


class InterviewSettingsForm(FlaskForm):
    """Wizard steps 2-4; create and edit both inherit these fields."""
    ai_technical_test = BooleanField("AI technical test")
    personality_test = BooleanField("Personality test")
    interview_mode = SelectField("Interview mode", choices=INTERVIEW_MODES, default=DEFAULT_SETTINGS["interview_mode"])
    experience_level = SelectField("Experience level", choices=EXPERIENCE_LEVELS, default=DEFAULT_SETTINGS["experience_level"])
    interview_type = SelectField("Interview type", choices=INTERVIEW_TYPES, default=DEFAULT_SETTINGS["interview_type"])
    environment = SelectField("Environment", choices=ENVIRONMENTS, default=DEFAULT_SETTINGS["environment"])
    lighting = SelectField("Lighting", choices=LIGHTING, default=DEFAULT_SETTINGS["lighting"])
    notes = TextAreaField("Notes", validators=[Optional(), Length(max=5000)])

    def settings_data(self):
        return {name: getattr(self, name).data for name in DEFAULT_SETTINGS}

    def sent_settings(self):
        """Only the settings fields present in the request."""
        return {name: getattr(self, name).data for name in DEFAULT_SETTINGS if getattr(self, name).raw_data}


class QuickScheduleForm(FlaskForm):
    candidate_id = StringField("Candidate", validators=[DataRequired(message="Please select a candidate")])
    position = StringField("Position", validators=[DataRequired(message="Position is required"), Length(max=200)])
    date = DateTimeField("Date", format=DATE_FORMATS, validators=[DataRequired()])
    interviewer_id = StringField("Interviewer", validators=[Optional()])


class InterviewForm(InterviewSettingsForm, QuickScheduleForm):
    pass


class InterviewEditForm(InterviewSettingsForm):
    candidate_id = StringField("Candidate", validators=[Optional()])
    position = StringField("Position", validators=[DataRequired(message="Position is required"), Length(max=200)])
    date = DateTimeField("Date", format=DATE_FORMATS, validators=[DataRequired()])
    interviewer_id = StringField("Interviewer", validators=[Optional()])
    status = SelectField("Status", choices=[(s, s) for s in INTERVIEW_STATUSES])


class AssignExamsForm(FlaskForm):
    exam_ids = SelectMultipleField("Exams", choices=[], validators=[Optional()])
