from __future__ import annotations

import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class Settings(BaseModel):
    """Runtime configuration with sensible defaults for local development."""

    cors_allow_origins: List[str] = Field(
        default_factory=lambda: [
            origin.strip()
            for origin in os.getenv(
                "CORS_ALLOW_ORIGINS", "http://localhost:3000"
            ).split(",")
            if origin.strip()
        ],
        description="Comma separated list of allowed origins.",
    )
    data_retention_days: int = Field(
        default=int(os.getenv("DATA_RETENTION_DAYS", "30")),
        ge=1,
        description="Submissions older than this many days are dropped.",
    )
    min_submission_length: int = Field(
        default=int(os.getenv("MIN_SUBMISSION_LENGTH", "10")),
        ge=1,
        description="Shortest accepted submission, after trimming.",
    )
    max_submission_length: int = Field(
        default=int(os.getenv("MAX_SUBMISSION_LENGTH", "2000")),
        ge=1,
        description="Longest accepted submission, after trimming.",
    )
    allow_keyword_extension: bool = Field(
        default=os.getenv("ALLOW_KEYWORD_EXTENSION", "true").lower() == "true",
        description="When false, POST /crisis/keywords is rejected.",
    )
    log_level: str = Field(
        default=os.getenv("LOG_LEVEL", "INFO").upper(),
        description="Level applied to the secret_stress loggers.",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
