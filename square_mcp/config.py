"""Application settings loaded from environment variables."""

from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PRODUCTION_BASE_URL = "https://connect.squareup.com"
SANDBOX_BASE_URL = "https://connect.squareupsandbox.com"


class Settings(BaseSettings):
    """Central configuration — values are read from env vars / .env file.

    Built once at startup and frozen; collaborators receive it explicitly
    instead of reading the environment themselves.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    # ── Square API ───────────────────────────────────────
    ACCESS_TOKEN: str = ""
    SANDBOX: bool = False
    PRODUCTION: bool = False
    SQUARE_VERSION: str = "2025-04-16"
    REQUEST_TIMEOUT: float = 30.0

    # ── Policy ───────────────────────────────────────────
    DISALLOW_WRITES: bool = False

    # ── Registry ─────────────────────────────────────────
    REGISTRY_MODE: Literal["full", "simple"] = "full"

    # ── Server ───────────────────────────────────────────
    SERVER_NAME: str = "square-mcp-server"
    SERVER_VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # ── Logging ──────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    # ── CORS ─────────────────────────────────────────────
    CORS_ORIGINS: list[str] = ["*"]

    @model_validator(mode="after")
    def _check_environment(self) -> "Settings":
        if self.SANDBOX and self.PRODUCTION:
            raise ValueError("Both SANDBOX and PRODUCTION env vars are true")
        return self

    @property
    def base_url(self) -> str:
        """Root URL of the Square API for the selected environment."""
        return SANDBOX_BASE_URL if self.SANDBOX else PRODUCTION_BASE_URL


settings = Settings()
