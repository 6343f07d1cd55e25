"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5001"))
    DEBUG = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes", "on"}

    # Persistence: "prisma" (PostgreSQL via DATABASE_URL) or "memory"
    PERSISTENCE_BACKEND = os.getenv("PERSISTENCE_BACKEND", "prisma").lower()

    # Auth
    ACCESS_TOKEN_KEY = os.getenv("ACCESS_TOKEN_KEY", "default-access-token-key-change-me-please")
    REFRESH_TOKEN_KEY = os.getenv("REFRESH_TOKEN_KEY", "default-refresh-token-key-change-me-please")
    ACCESS_TOKEN_AGE = int(os.getenv("ACCESS_TOKEN_AGE", "3000"))  # seconds
    TOKEN_ALGORITHM = os.getenv("TOKEN_ALGORITHM", "HS256")
    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )
