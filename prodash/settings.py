from __future__ import annotations

from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = Field("sqlite+aiosqlite:///./prodash.db", alias="DATABASE_URL")
    session_secret: str = Field("change-me", alias="PRODASH_SESSION_SECRET")
    cookie_secure: bool = Field(False, alias="PRODASH_COOKIE_SECURE")
    session_max_age_days: int = Field(30, alias="PRODASH_SESSION_MAX_AGE_DAYS")

    timezone: str = Field("UTC", alias="PRODASH_TIMEZONE")
    streak_mode: Literal["parity", "trailing"] = Field("parity", alias="PRODASH_STREAK_MODE")
    streak_derive_on_read: bool = Field(True, alias="PRODASH_STREAK_DERIVE_ON_READ")

    admin_emails_raw: str = Field("", alias="PRODASH_ADMIN_EMAILS")

    openai_api_key: str | None = Field(None, alias="OPENAI_API_KEY")
    openai_base_url: str = Field("https://api.openai.com", alias="OPENAI_BASE_URL")
    openai_model: str = Field("gpt-3.5-turbo", alias="OPENAI_MODEL")

    log_level: str = Field("INFO", alias="BACKEND_LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def admin_emails(self) -> List[str]:
        return [email.strip().lower() for email in self.admin_emails_raw.split(",") if email.strip()]

    @property
    def session_max_age_seconds(self) -> int:
        return int(self.session_max_age_days) * 24 * 60 * 60


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
