"""Application configuration via environment variables."""

from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

BUNDLED_SCHEMAS_PATH = Path(__file__).parent / "schemas" / "definitions"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Schema files
    SCHEMAS_PATH: Path = BUNDLED_SCHEMAS_PATH

    # Validation
    LOG_PASSED_VALIDATIONS: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
