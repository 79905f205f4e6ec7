"""Service configuration loaded from environment variables or a .env file."""

from pathlib import Path
from typing import ClassVar, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class ServiceConfig(BaseSettings):
    """Configuration for the image service.

    Built once at startup and passed explicitly to `create_app`; request
    handlers never read the environment.
    """

    image_dir: Path = Field(Path("images"), description="Directory images are served from")
    public_dir: Path = Field(Path("public"), description="Static files (demo page) served as fallback")
    host: str = Field("0.0.0.0", description="Bind address")
    port: int = Field(3000, ge=1, le=65535, description="Bind port")
    log_level: LogLevel = Field("INFO", description="loguru level for the stderr sink")
    cache_max_age: int = Field(31536000, ge=0, description="Cache-Control max-age for downloads (seconds)")

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
