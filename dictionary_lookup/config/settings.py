"""Configuration management with Pydantic v2 settings style"""

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseSettings):
    """Dictionary API configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    base_url: str = Field(
        default="https://api.dictionaryapi.dev/api",
        validation_alias=AliasChoices("DICTIONARY_API_BASE_URL"),
    )
    api_version: str = Field(
        default="v2", validation_alias=AliasChoices("DICTIONARY_API_VERSION")
    )
    language: str = Field(
        default="en", validation_alias=AliasChoices("DICTIONARY_LANGUAGE")
    )
    request_timeout: float = Field(
        default=10.0, validation_alias=AliasChoices("DICTIONARY_REQUEST_TIMEOUT")
    )
    user_agent: str = Field(
        default="dictl/1.0.0", validation_alias=AliasChoices("DICTIONARY_USER_AGENT")
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL"""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("api_version", "language")
    @classmethod
    def validate_path_segment(cls, v: str) -> str:
        """Reject empty or slash-bearing URL path segments"""
        v = v.strip()
        if not v or "/" in v:
            raise ValueError("Value must be a single non-empty path segment")
        return v

    @field_validator("request_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate request timeout"""
        if v <= 0:
            raise ValueError("Request timeout must be positive")
        return v


class OutputSettings(BaseSettings):
    """Terminal output configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    no_color: bool = Field(
        default=False, validation_alias=AliasChoices("DICTL_NO_COLOR")
    )


class LoggingSettings(BaseSettings):
    """Logging configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    level: str = Field(default="WARNING", validation_alias=AliasChoices("LOG_LEVEL"))
    file: Path | None = Field(default=None, validation_alias=AliasChoices("LOG_FILE"))

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


class AppSettings(BaseSettings):
    """Main application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    api: ApiSettings = Field(default_factory=ApiSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance
settings = AppSettings()
