import os
from typing import Annotated, List
from dotenv import load_dotenv
from limits import parse_many
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

# Load environment variables from the correct .env file
APP_ENV = os.getenv("APP_ENV", "development")
env_file = ".env" if APP_ENV == "development" else f".env.{APP_ENV}"
load_dotenv(env_file)

class Settings(BaseSettings):
    APP_ENV: str = "development"
    DEBUG: bool = False
    DATABASE_URL: str
    # Comma-separated in the environment, split by split_origins
    ALLOWED_ORIGINS: Annotated[List[str], NoDecode] = ["*"]
    LOG_LEVEL: str = "info"

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_STORAGE_URI: str = "memory://"
    DEFAULT_RATE_LIMIT: str = "60/minute"
    LOGIN_RATE_LIMIT: str = "5/minute"

    @field_validator("ALLOWED_ORIGINS", mode="before")
    def split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("DEFAULT_RATE_LIMIT", "LOGIN_RATE_LIMIT")
    def validate_rate_limit(cls, value: str) -> str:
        """Fail at startup rather than on the first limited request."""
        try:
            parse_many(value)
        except ValueError as e:
            raise ValueError(f"Invalid rate limit string '{value}': {e}") from e
        return value

settings = Settings()
