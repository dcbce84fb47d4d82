from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CONVERTER_")

    app_name: str = "Universal Unit Converter"
    debug: bool = True
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    backend_url: str = "http://localhost:8000"  # external conversion service
    request_timeout: float = 10.0  # seconds, applied by the httpx client
    history_limit: int = Field(10, ge=1, le=10)  # ledger never holds more than 10
    theme_primary: str = "#0077c2"
    theme_accent: str = "#43a047"
    theme_secondary: str = "#e0e0e0"
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "info"


settings = Settings()
