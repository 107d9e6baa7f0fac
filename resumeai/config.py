# resumeai/config.py
from __future__ import annotations
import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    TESTING = False

    # OpenAI
    OPENAI_API_KEY = os.environ.get("OPENAI_API_KEY", "")
    OPENAI_BASE_URL = os.environ.get("OPENAI_BASE_URL", "")

    # Supabase (auth + usage counters)
    SUPABASE_URL = os.environ.get("SUPABASE_URL", "")
    SUPABASE_SERVICE_ROLE_KEY = os.environ.get("SUPABASE_SERVICE_ROLE_KEY", "")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # CORS origins if you need them (comma-separated); empty = allow all
    CORS_ORIGINS = [s.strip() for s in os.environ.get("CORS_ORIGINS", "").split(",") if s.strip()]


class DevConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG").upper()


class ProdConfig(Config):
    DEBUG = False


class TestConfig(Config):
    TESTING = True
    DEBUG = True
    OPENAI_API_KEY = "test-key"
    SUPABASE_URL = ""
    SUPABASE_SERVICE_ROLE_KEY = ""


def get_config(env: str | None = None):
    """Resolve config by env string or environment variables."""
    env = (env or os.environ.get("RESUMEAI_ENV") or os.environ.get("FLASK_ENV") or "production").lower()
    if env in ("dev", "development"):
        return DevConfig
    if env in ("test", "testing"):
        return TestConfig
    return ProdConfig
