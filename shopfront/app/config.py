import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///shopfront.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JSON_SORT_KEYS = False

    # Comma-separated list
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("APP_PORT", "8080"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Simple pagination defaults
    DEFAULT_LIMIT = int(os.getenv("DEFAULT_LIMIT", "12"))
    MAX_LIMIT = int(os.getenv("MAX_LIMIT", "50"))

    # Signed auth tokens; seconds
    TOKEN_MAX_AGE = int(os.getenv("TOKEN_MAX_AGE", str(7 * 24 * 3600)))


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    LOG_LEVEL = "DEBUG"
