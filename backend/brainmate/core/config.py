from pydantic_settings import BaseSettings
from typing import List, Union
from pydantic import field_validator


class Settings(BaseSettings):
    # Database backing the key/value store
    DATABASE_URL: str = "sqlite:///./brainmate.db"

    # Static bearer credential shared with the client
    API_BEARER_TOKEN: str
    API_PREFIX: str = ""  # e.g. "/make-server-c5661566" behind a function gateway

    # Reading
    DAILY_LIMIT: int = 5  # Advisory only, never enforced server-side
    FEED_SIZE: int = 7  # Articles generated per daily feed

    # Profile defaults
    DEFAULT_DISPLAY_NAME: str = "Reader"
    DEFAULT_BIO: str = "독서를 사랑하는 사람"

    # Application
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    RATE_LIMIT: str = "100/minute"
    CORS_ORIGINS: Union[List[str], str] = ["*"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            # Split by comma or keep as single item
            return [origin.strip() for origin in v.split(",")]
        return v

    @field_validator("API_PREFIX")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = "/" + v
        return v

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields in .env


settings = Settings()
