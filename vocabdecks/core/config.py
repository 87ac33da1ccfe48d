from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from pathlib import Path
import logging
import os

_logger = logging.getLogger(__name__)

# Look for .env in the project root (parent of the vocabdecks package)
project_dir = Path(__file__).parent.parent.parent
env_path = project_dir / ".env"

if env_path.exists():
    load_dotenv(env_path, override=False)
    _logger.info(f"Loaded .env file from: {env_path}")
else:
    # Fallback to current directory
    current_env = Path(".env")
    if current_env.exists():
        load_dotenv(current_env, override=False)
        _logger.info(f"Loaded .env file from: {current_env.absolute()}")
    else:
        _logger.debug(f".env file not found at {env_path} or {current_env.absolute()}")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database - hosting providers usually expose DATABASE_URL (uppercase)
    database_url: str = ""
    sql_echo: bool = False

    # API
    api_v1_prefix: str = "/api/v1"

    # CORS
    cors_origins: list[str] = ["*"]

    # Runtime
    environment: str = "production"
    log_level: str = "INFO"

    # Header set by the upstream authentication layer with the signed-in user id
    identity_header: str = "X-User-Id"

    class Config:
        env_file = ".env"
        case_sensitive = False

    def __init__(self, **kwargs):
        # Ensure we read DATABASE_URL from environment even if lower-case lookup misses it
        if not kwargs.get("database_url"):
            kwargs["database_url"] = os.getenv("DATABASE_URL", "")
        super().__init__(**kwargs)

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "local")


# Create settings instance
settings = Settings()

# Validate required DATABASE_URL
if not settings.database_url:
    raise ValueError("DATABASE_URL environment variable is required")
