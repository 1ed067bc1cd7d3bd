from pathlib import Path
from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SESSION_SECRET = "default-secret-key"
PACKAGE_STATIC_DIR = Path(__file__).resolve().parents[1] / "static"


class Settings(BaseSettings):
    # Blank values fall back to the defaults below
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", env_ignore_empty=True)

    APP_NAME: str = "Schedulify"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Gemini
    GEMINI_API_KEY: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY")
    )
    GEMINI_MODEL: str = "gemini-2.0-flash"
    GEMINI_TIMEOUT: Optional[float] = None  # seconds, unset = wait for the model

    # Session cookie
    SESSION_SECRET: str = DEFAULT_SESSION_SECRET
    SESSION_MAX_AGE: int = 3600  # 1 hour idle expiry

    # e.g. CORS_ALLOW_ORIGINS="http://localhost:5173,http://127.0.0.1:3000"
    CORS_ALLOW_ORIGINS: str = "*"

    STATIC_DIR: Path = PACKAGE_STATIC_DIR
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def has_gemini_key(self) -> bool:
        return bool(self.GEMINI_API_KEY and self.GEMINI_API_KEY.strip())

    @property
    def uses_default_session_secret(self) -> bool:
        return self.SESSION_SECRET == DEFAULT_SESSION_SECRET

    @property
    def cors_origins(self) -> List[str]:
        return [s.strip() for s in self.CORS_ALLOW_ORIGINS.split(",") if s.strip()]


settings = Settings()
