# app/core/config.py
import os
import secrets
import logging

from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv())

logger = logging.getLogger(__name__)


class Settings:
    NODE_ENV = os.getenv("NODE_ENV", "development")
    IS_PRODUCTION = NODE_ENV == "production"
    PORT = int(os.getenv("PORT", "3001"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # SESSION_SECRET is mandatory in production
    SESSION_SECRET = os.getenv("SESSION_SECRET")
    if not SESSION_SECRET:
        if IS_PRODUCTION:
            raise RuntimeError("SESSION_SECRET is not set")
        SESSION_SECRET = secrets.token_urlsafe(32)
        logger.warning("SESSION_SECRET not set; using a temporary secret")

    SESSION_ALG = "HS256"
    SESSION_COOKIE = "calmora.sid"
    SESSION_MAX_AGE = 24 * 60 * 60

    DATABASE_URL = os.getenv("DATABASE_URL")
    DB_HOST = os.getenv("DB_HOST")
    DB_USER = os.getenv("DB_USER", "root")
    DB_PASSWORD = os.getenv("DB_PASSWORD", "")
    DB_NAME = os.getenv("DB_NAME", "calmora")

    FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5500")

    OPENROUTER_API_KEY = os.getenv("OPENROUTER_API_KEY")
    OPENROUTER_MODEL = os.getenv("OPENROUTER_MODEL", "openai/gpt-3.5-turbo")
    OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
    if not OPENROUTER_API_KEY:
        logger.warning("OPENROUTER_API_KEY not set; /api/chat will be unavailable")

    SMTP_HOST = os.getenv("SMTP_HOST", "smtp.gmail.com")
    SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
    SMTP_USER = os.getenv("SMTP_USER")
    SMTP_PASS = os.getenv("SMTP_PASS")
    ADMIN_EMAIL = os.getenv("ADMIN_EMAIL")

    @property
    def allowed_origins(self) -> list:
        origins = [
            self.FRONTEND_URL,
            "http://localhost:3001",
            "http://localhost:5500",
            "http://localhost:5501",
        ]
        out = []
        for o in origins:
            if o and o not in out:
                out.append(o)
        return out

    @property
    def smtp_configured(self) -> bool:
        return bool(self.SMTP_USER and self.SMTP_PASS)


settings = Settings()
