from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='PERSIAN_DATETIME_', env_file='.env', env_file_encoding='utf-8', extra='ignore'
    )

    # Logging Configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    LOG_FILE_PATH: Optional[str] = None
    LOG_FILE_MAX_BYTES: int = 1024 * 1024 * 5  # 5MB
    LOG_FILE_BACKUP_COUNT: int = 3

    # Rendering
    USE_PERSIAN_DIGITS: bool = Field(default=True, description="If True, formatted output uses Persian digits (۰-۹)")


settings = Settings()
