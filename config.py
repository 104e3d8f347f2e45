import os
from dotenv import load_dotenv
load_dotenv()

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///hireboard.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # object storage (avatars / resumes buckets)
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "local")
    LOCAL_STORAGE_DIR = os.getenv("LOCAL_STORAGE_DIR", "./storage")
    S3_ENDPOINT = os.getenv("S3_ENDPOINT")
    S3_REGION = os.getenv("S3_REGION")
    S3_ACCESS_KEY = os.getenv("S3_ACCESS_KEY")
    S3_SECRET_KEY = os.getenv("S3_SECRET_KEY")
    STORAGE_PUBLIC_URL = os.getenv("STORAGE_PUBLIC_URL")
    MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))

    # candidate/interview linking
    LINKER_FALLBACK_LIMIT = int(os.getenv("LINKER_FALLBACK_LIMIT", "100"))
    LINKER_FUZZY_FALLBACK = os.getenv("LINKER_FUZZY_FALLBACK", "1") == "1"

    DASHBOARD_JOBS_LIMIT = int(os.getenv("DASHBOARD_JOBS_LIMIT", "5"))
    # mock chat reply pause; it blocks the worker handling the request, 0 leaves pacing to the client
    MOCK_CHAT_DELAY_SECONDS = float(os.getenv("MOCK_CHAT_DELAY_SECONDS", "1.5"))


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    WTF_CSRF_ENABLED = False
    REDIS_URL = None
    STORAGE_BACKEND = "local"
    MOCK_CHAT_DELAY_SECONDS = 0
