# app/config/settings.py
# Runtime configuration for the API, read from the environment

import os
from typing import List
from dotenv import load_dotenv

load_dotenv()

DEFAULT_SECRET_KEY = "change-me-in-production"


class Settings:
    """Application settings"""

    # Database
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./tasks.db")
    DB_SSLMODE = os.getenv("DB_SSLMODE")  # e.g. "require" on Render

    # Token signing
    SECRET_KEY = os.getenv("SECRET_KEY", DEFAULT_SECRET_KEY)
    ALGORITHM = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 120))  # 2 hours

    # Password hashing cost
    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", 12))

    # HTTP
    CORS_ORIGINS = os.getenv(
        "CORS_ORIGINS",
        "http://localhost:4200,http://127.0.0.1:4200",
    )
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8000"))
    RELOAD = os.getenv("RELOAD", "true").lower() == "true"

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @classmethod
    def uses_default_secret_key(cls) -> bool:
        """True when SECRET_KEY was not configured"""
        return cls.SECRET_KEY == DEFAULT_SECRET_KEY

    @classmethod
    def get_cors_origins(cls) -> List[str]:
        """Split the comma-separated CORS origin list"""
        return [origin.strip() for origin in cls.CORS_ORIGINS.split(",") if origin.strip()]

    @classmethod
    def get_connect_args(cls) -> dict:
        """Driver arguments for the configured database"""
        if cls.DATABASE_URL.startswith("sqlite"):
            # One session per request may hop threads inside the server pool
            return {"check_same_thread": False}
        if cls.DB_SSLMODE:
            return {"sslmode": cls.DB_SSLMODE}
        return {}


settings = Settings()
