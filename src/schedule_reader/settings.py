"""Runtime settings, read from SCHEDULE_READER_* environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReaderSettings(BaseSettings):
    """Settings for reading a schedule and delivering its records."""

    model_config = SettingsConfigDict(
        env_prefix="SCHEDULE_READER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === INPUT ===
    sheet_name: str = "Sheet1"

    # === DELIVERY ===
    sink_host: str = "127.0.1.1"
    sink_port: int = Field(default=5050, ge=1, le=65535)
    sink_timeout: float = Field(default=5.0, gt=0, description="Seconds per connect/send")
    sink_retries: int = Field(default=1, ge=0, description="Reconnect attempts per record")
    sink_retry_delay: float = Field(default=0.5, ge=0)
    employees: list[str] = Field(
        default_factory=list, description="Names to deliver; empty delivers everyone"
    )

    # === LOGGING ===
    log_level: str = "INFO"
    log_format: str = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"
