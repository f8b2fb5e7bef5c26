"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from password_guard.domain.password_policy import RECOMMENDED_ROUNDS, PasswordPolicy

NonEmptyStr = Annotated[str, Field(min_length=1)]


class Settings(BaseSettings):
    """Environment-driven application settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    password_field: NonEmptyStr = Field(default="password", validation_alias="PASSWORD_FIELD")
    allow_empty_password: bool = Field(default=False, validation_alias="ALLOW_EMPTY_PASSWORD")
    password_hash_rounds: int = Field(
        default=RECOMMENDED_ROUNDS,
        validation_alias="PASSWORD_HASH_ROUNDS",
    )
    database_url: NonEmptyStr = Field(
        default="sqlite+aiosqlite:///./password_guard.db",
        validation_alias="DATABASE_URL",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    def to_policy(self) -> PasswordPolicy:
        """Return the password policy described by these settings."""

        return PasswordPolicy(
            allow_empty_password=self.allow_empty_password,
            password_field=self.password_field,
            rounds=self.password_hash_rounds,
        )


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()
