"""The free-form settings document stored on each interview."""

DEFAULT_SETTINGS = {
    "ai_technical_test": False,
    "personality_test": False,
    "interview_mode": "video",
    "experience_level": "mid",
    "interview_type": "technical",
    "environment": "office",
    "lighting": "day",
    "notes": "",
}

INTERVIEW_MODES = [("text", "Text"), ("audio", "Audio"), ("video", "Video")]
EXPERIENCE_LEVELS = [("entry", "Entry Level"), ("mid", "Mid Level"), ("senior", "Senior Level"),
                     ("leadership", "Leadership Position")]
INTERVIEW_TYPES = [("technical", "Technical"), ("behavioral", "Behavioral"), ("panel", "Panel Interview"),
                   ("case", "Case Interview"), ("informational", "Informational")]
ENVIRONMENTS = [("office", "Office"), ("startup", "Startup"), ("cafe", "Cafe"), ("conference", "Conference Room"),
                ("library", "Library"), ("home", "Home Office"), ("outdoor", "Outdoor")]
LIGHTING = [("day", "Day"), ("night", "Night")]

# scheduling wizard: (key, title, fields) in the order the dialog walks them
WIZARD_STEPS = [
    ("basic", "Basic Info", ["candidate_id", "position", "date", "interviewer_id"]),
    ("tests", "Test Options", ["ai_technical_test", "personality_test"]),
    ("settings", "Interview Settings", ["interview_mode", "experience_level", "interview_type"]),
    ("environment", "Environment", ["environment", "lighting", "notes"]),
]

# mock interview preparation options, merged over the stored settings
DEFAULT_PREPARATION = {
    "language": "english",
    "interviewer_style": "friendly",
    "stress_level": "normal",
}


def build_settings(values=None):
    """Settings document from ``values``; unknown keys are dropped, gaps defaulted."""
    values = values or {}
    settings = dict(DEFAULT_SETTINGS)
    for key in DEFAULT_SETTINGS:
        if values.get(key) is not None:
            settings[key] = values[key]
    settings["notes"] = settings["notes"] or ""
    return settings


def merge_preparation(settings, preparation):
    merged = dict(DEFAULT_PREPARATION)
    merged["virtual_background"] = (settings or {}).get("environment") or "office"
    merged.update(settings or {})
    merged.update({k: v for k, v in (preparation or {}).items() if v})
    return merged


def wizard():
    return {
        "steps": [{"key": k, "title": t, "fields": f} for k, t, f in WIZARD_STEPS],
        "defaults": dict(DEFAULT_SETTINGS),
        "choices": {
            "interview_mode": INTERVIEW_MODES,
            "experience_level": EXPERIENCE_LEVELS,
            "interview_type": INTERVIEW_TYPES,
            "environment": ENVIRONMENTS,
            "lighting": LIGHTING,
        },
    }
