# ticketdesk/core/config.py
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str = Field(default="sqlite:///./tickets.db")
    APP_NAME: str = "Ticket Desk"
    APP_DESC: str = "Support ticket service"
    APP_VERSION: str = "1.0.0"

    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # CORS origins, comma separated
    CORS_ORIGINS: str = "*"

    # category -> admin responsible for it
    ADMINS: dict[str, str] = Field(
        default_factory=lambda: {"IT": "Alice", "HR": "Bob", "Finance": "Charlie"}
    )

    # client side
    TICKET_API_URL: str = "http://localhost:8080"
    WIRE_CASING: Literal["pascal", "camel"] = "pascal"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
