from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Values come from the process environment, then from a .env file next to
    # where the server is started.
    model_config = SettingsConfigDict(env_prefix="", extra="ignore", env_file=".env", env_file_encoding="utf-8")

    # Env vars:
    # - LOG_LEVEL (optional, default INFO)
    # - SIGNUP_CONFLICT_STATUS (optional): status for a duplicate email. 500 keeps the
    #   generic error path; 409 reports it as a conflict.
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    signup_conflict_status: int = Field(default=500, validation_alias="SIGNUP_CONFLICT_STATUS")

    def model_post_init(self, __context):  # type: ignore[override]
        # Only the two supported mappings; anything else falls back to the generic path.
        if self.signup_conflict_status not in (409, 500):
            self.signup_conflict_status = 500


def get_settings() -> Settings:
    """Build Settings from the environment.

    Read per request through ``deps.get_settings_dep``, which tests replace
    via ``app.dependency_overrides``.
    """
    return Settings()
