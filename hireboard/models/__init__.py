from .user import AuthUser
from .profile import Profile, Interviewer, Role
from .candidate import Candidate
from .interview import Interview
from .exam import Exam, InterviewExam
from .job import Job, JobApplication
# base is imported by the above as needed
