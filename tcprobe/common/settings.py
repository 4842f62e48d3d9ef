# tcprobe/common/settings.py
from __future__ import annotations

from functools import lru_cache
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    prefix: str = "/api"


class FFProbeConfig(BaseModel):
    timeout_sec: int = 30
    bin: str = Field(default="ffprobe", description="ffprobe executable; set FFPROBE__BIN to override")


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "tcprobe"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "WARNING"

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    ffprobe: FFProbeConfig = FFProbeConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper(cls, v):
        return str(v).strip().upper() if v is not None else "WARNING"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from tcprobe.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
