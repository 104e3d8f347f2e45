"""Scripted mock interview conversation.

No model is called: the interviewer opens with an introduction built from the
interview settings and then cycles through a fixed list of prompts for the
interview type. The transcript itself is kept by the client; the server only
needs the number of messages exchanged so far.
"""
from datetime import datetime, timezone

INTRO_BY_TYPE = {
    "behavioral": "Today, I'll be asking about your past experiences and how they demonstrate your skills. ",
    "technical": "I'll be asking technical questions to assess your skills for this role. ",
    "panel": "Today you'll be speaking with several interviewers to assess different aspects of your experience. ",
    "case": "We'll be working through a business case to see your problem-solving approach. ",
    "informational": "This is primarily an informational interview to help you learn more about our company and the role. ",
}

HIGH_STRESS_NOTE = "Please note that this interview will be challenging to assess how you perform under pressure. "

CANNED_REPLIES = {
    "technical": [
        "Can you explain your experience with modern JavaScript frameworks?",
        "What challenges did you face in your last project and how did you overcome them?",
        "How would you optimize a slow-performing website?",
        "Describe your approach to testing and quality assurance.",
        "What's your experience with cloud platforms like AWS, Azure, or GCP?",
    ],
    "behavioral": [
        "Tell me about a time you had to deal with a difficult team member.",
        "Describe a situation where you had to work under a tight deadline.",
        "Can you share an example of when you showed leadership?",
        "How do you handle criticism?",
        "What's your biggest professional achievement so far?",
    ],
    "informational": [
        "Do you have any questions about our company culture?",
        "What aspects of the role are you most excited about?",
        "What skills are you looking to develop in this position?",
        "How do you see this role fitting into your long-term career goals?",
        "What do you value most in a workplace?",
    ],
}

INTERVIEWER_AVATARS = {
    "friendly": "https://api.dicebear.com/7.x/personas/svg?seed=interviewer1",
    "tough": "https://api.dicebear.com/7.x/personas/svg?seed=interviewer2",
    "technical": "https://api.dicebear.com/7.x/personas/svg?seed=interviewer3",
}


def chat_message(role, content):
    return {"role": role, "content": content, "timestamp": datetime.now(timezone.utc).isoformat()}


def introduction(candidate_name, position, settings=None):
    settings = settings or {}
    interview_type = settings.get("interview_type") or "technical"
    stress_level = settings.get("stress_level") or "normal"

    text = f"Hello {candidate_name}, I'm your interviewer for the {position} position. "
    text += INTRO_BY_TYPE.get(interview_type, "")
    if stress_level == "high":
        text += HIGH_STRESS_NOTE
    text += "Let's get started. Could you please introduce yourself and tell me why you're interested in this position?"
    return text


def canned_reply(history_length, settings=None):
    """Reply for a user message sent when ``history_length`` messages existed.

    Deterministic: the index advances once per exchange and wraps around.
    """
    interview_type = (settings or {}).get("interview_type") or "technical"
    replies = CANNED_REPLIES.get(interview_type, CANNED_REPLIES["technical"])
    return replies[(history_length // 2) % len(replies)]


def interviewer_avatar(settings=None):
    style = (settings or {}).get("interviewer_style") or "friendly"
    return INTERVIEWER_AVATARS.get(style, INTERVIEWER_AVATARS["friendly"])

