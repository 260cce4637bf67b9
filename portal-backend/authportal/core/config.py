# File: authportal/core/config.py

import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

load_dotenv()

# Accepted bcrypt cost factors; bcrypt itself caps rounds at 31.
MIN_BCRYPT_ROUNDS = 10
MAX_BCRYPT_ROUNDS = 31


class Settings(BaseModel):
    model_config = ConfigDict(validate_default=True)

    PROJECT_NAME: str = "Auth Portal API"
    VERSION: str = "0.1.0"

    api_prefix: str = "/api"

    # Process
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "5000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    backend_cors_origins: List[str] = os.getenv(
        "BACKEND_CORS_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173",
    )

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./authportal.db")

    # Password hashing cost factor
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("bcrypt_rounds")
    @classmethod
    def check_bcrypt_rounds(cls, v: int) -> int:
        if not MIN_BCRYPT_ROUNDS <= v <= MAX_BCRYPT_ROUNDS:
            raise ValueError(
                f"bcrypt_rounds must be between {MIN_BCRYPT_ROUNDS} and {MAX_BCRYPT_ROUNDS}"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()

