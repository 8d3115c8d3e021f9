from pathlib import Path
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_DIR = Path.home() / ".config" / "cliargs"
CONFIG_ENV = CONFIG_DIR / ".env"

OutputFormat = Literal["table", "json", "print_r"]
LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CLIARGS_",
        env_file=(CONFIG_ENV, ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: LogLevel = "ERROR"
    log_file: Path | None = None
    output_format: OutputFormat = "table"
    strict: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v
