from typing import Any, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 3000


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    max_messages: Optional[int] = None
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    @field_validator("port", mode="before")
    @classmethod
    def fallback_port(cls, value: Any) -> Any:
        try:
            return int(value)
        except (TypeError, ValueError):
            return DEFAULT_PORT

    @field_validator("max_messages", mode="before")
    @classmethod
    def positive_or_unbounded(cls, value: Any) -> Any:
        if value is None:
            return None
        try:
            limit = int(value)
        except (TypeError, ValueError):
            return None
        return limit if limit > 0 else None


settings = Settings()
